"""Static ISO 3166-1 alpha-2 dataset used when the reference API is down."""

from typing import Dict

FALLBACK_COUNTRY_CODES: Dict[str, str] = {
    "US": "United States",
    "CA": "Canada",
    "MX": "Mexico",
    "GB": "United Kingdom",
    "DE": "Germany",
    "FR": "France",
    "IT": "Italy",
    "ES": "Spain",
    "NL": "Netherlands",
    "BE": "Belgium",
    "CH": "Switzerland",
    "AT": "Austria",
    "SE": "Sweden",
    "NO": "Norway",
    "DK": "Denmark",
    "FI": "Finland",
    "PL": "Poland",
    "CZ": "Czech Republic",
    "HU": "Hungary",
    "RO": "Romania",
    "BG": "Bulgaria",
    "HR": "Croatia",
    "SI": "Slovenia",
    "SK": "Slovakia",
    "LT": "Lithuania",
    "LV": "Latvia",
    "EE": "Estonia",
    "IE": "Ireland",
    "PT": "Portugal",
    "GR": "Greece",
    "CY": "Cyprus",
    "MT": "Malta",
    "LU": "Luxembourg",
    "RU": "Russia",
    "UA": "Ukraine",
    "BY": "Belarus",
    "MD": "Moldova",
    "RS": "Serbia",
    "ME": "Montenegro",
    "BA": "Bosnia and Herzegovina",
    "MK": "North Macedonia",
    "AL": "Albania",
    "IS": "Iceland",
    "AD": "Andorra",
    "MC": "Monaco",
    "SM": "San Marino",
    "VA": "Vatican City",
    "LI": "Liechtenstein",
    "CN": "China",
    "JP": "Japan",
    "KR": "South Korea",
    "IN": "India",
    "TH": "Thailand",
    "VN": "Vietnam",
    "MY": "Malaysia",
    "ID": "Indonesia",
    "PH": "Philippines",
    "PK": "Pakistan",
    "BD": "Bangladesh",
    "LK": "Sri Lanka",
    "NP": "Nepal",
    "MM": "Myanmar",
    "KH": "Cambodia",
    "LA": "Laos",
    "MN": "Mongolia",
    "KZ": "Kazakhstan",
    "UZ": "Uzbekistan",
    "KG": "Kyrgyzstan",
    "TJ": "Tajikistan",
    "TM": "Turkmenistan",
    "AF": "Afghanistan",
    "IR": "Iran",
    "IQ": "Iraq",
    "SA": "Saudi Arabia",
    "AE": "United Arab Emirates",
    "QA": "Qatar",
    "KW": "Kuwait",
    "BH": "Bahrain",
    "OM": "Oman",
    "YE": "Yemen",
    "JO": "Jordan",
    "LB": "Lebanon",
    "SY": "Syria",
    "IL": "Israel",
    "TR": "Turkey",
    "GE": "Georgia",
    "AM": "Armenia",
    "AZ": "Azerbaijan",
    "SG": "Singapore",
    "HK": "Hong Kong",
    "TW": "Taiwan",
    "AU": "Australia",
    "NZ": "New Zealand",
    "BR": "Brazil",
    "AR": "Argentina",
    "CL": "Chile",
    "PE": "Peru",
    "CO": "Colombia",
    "VE": "Venezuela",
    "EC": "Ecuador",
    "BO": "Bolivia",
    "PY": "Paraguay",
    "UY": "Uruguay",
    "ZA": "South Africa",
    "EG": "Egypt",
    "NG": "Nigeria",
    "KE": "Kenya",
    "ET": "Ethiopia",
    "GH": "Ghana",
    "UG": "Uganda",
    "TZ": "Tanzania",
    "DZ": "Algeria",
    "MA": "Morocco",
    "TN": "Tunisia",
    "LY": "Libya",
    "SD": "Sudan",
    "SS": "South Sudan",
    "CM": "Cameroon",
    "CI": "Ivory Coast",
    "BF": "Burkina Faso",
    "ML": "Mali",
    "NE": "Niger",
    "TD": "Chad",
    "CF": "Central African Republic",
    "CG": "Republic of the Congo",
    "CD": "Democratic Republic of the Congo",
    "AO": "Angola",
    "ZM": "Zambia",
    "ZW": "Zimbabwe",
    "BW": "Botswana",
    "NA": "Namibia",
    "MZ": "Mozambique",
    "MW": "Malawi",
    "MG": "Madagascar",
    "MU": "Mauritius",
    "SC": "Seychelles",
    "RW": "Rwanda",
    "BI": "Burundi",
    "DJ": "Djibouti",
    "SO": "Somalia",
    "ER": "Eritrea",
    "SL": "Sierra Leone",
    "LR": "Liberia",
    "GW": "Guinea-Bissau",
    "GN": "Guinea",
    "SN": "Senegal",
    "GM": "Gambia",
    "CV": "Cape Verde",
    "MR": "Mauritania",
    "TG": "Togo",
    "BJ": "Benin",
}
