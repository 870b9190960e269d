"""Sample data seeder: three members and one routing rule set."""

import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.core.config import settings
from app.models import Member, RoutingRule, RoutingRuleSet

MEMBERS = [
    ("Moshe", "moshe@example.com"),
    ("Eldad", "eldad@example.com"),
    ("Alon", "alon@example.com"),
]


async def seed():
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        print("Seeding sample routing data")

        # RESTART IDENTITY so the members get ids 1, 2, 3 on every run
        await session.execute(
            text("TRUNCATE TABLE rules, routing_rules, members RESTART IDENTITY CASCADE")
        )
        await session.commit()
        print("Cleared existing data")

        members = [Member(name=name, email=email) for name, email in MEMBERS]
        session.add_all(members)
        await session.flush()
        moshe, eldad, alon = members
        print(f"Created {len(members)} members")

        rule_set = RoutingRuleSet(
            name="Default sales routing",
            default_member_id=moshe.id,
            rules=[
                RoutingRule(
                    name="Eldad - US contacts or WIX",
                    conditions=[
                        {"field": "contact_country", "operator": "=", "value": "US"},
                        {"field": "company_name", "operator": "=", "value": "WIX"},
                    ],
                    member_id=eldad.id,
                    priority=0,
                    position=0,
                ),
                RoutingRule(
                    name="Alon - accounting firms",
                    conditions=[
                        {
                            "field": "company_industry",
                            "operator": "=",
                            "value": "ACCOUNTING",
                        },
                    ],
                    member_id=alon.id,
                    priority=1,
                    position=1,
                ),
            ],
        )
        session.add(rule_set)
        await session.commit()
        print(f"Created routing rules {rule_set.id} with 2 rules")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
