"""Flag emoji: region codes and curated display names.

Country flags are pairs of regional indicator symbols, one per letter of
the region code (🇰🇪 is REGIONAL INDICATOR SYMBOL LETTER K + ... E).
Subdivision flags (England, Scotland, Wales) are a black flag followed
by tag characters spelling the subdivision code and a cancel tag.

Region codes are normalized to upper case, with a dash between country
and subdivision: ``"KE"``, ``"GB-ENG"``.
"""

from __future__ import annotations

import logging

import inputkit.log  # registers TRACE level and logger.trace()

logger = logging.getLogger(__name__)

REGIONAL_INDICATOR_A = 0x1F1E6
REGIONAL_INDICATOR_Z = 0x1F1FF
BLACK_FLAG = 0x1F3F4
TAG_DIGIT_ZERO = 0xE0030
TAG_DIGIT_NINE = 0xE0039
TAG_SMALL_A = 0xE0061
TAG_SMALL_Z = 0xE007A
CANCEL_TAG = 0xE007F

FLAG_NAME_PREFIX = "Flag - "

# Region code -> display name
FLAG_NAMES: dict[str, str] = {
    "AC": "Ascension Island", "AD": "Andorra", "AE": "United Arab Emirates",
    "AF": "Afghanistan", "AG": "Antigua & Barbuda", "AI": "Anguilla",
    "AL": "Albania", "AM": "Armenia", "AO": "Angola", "AQ": "Antarctica",
    "AR": "Argentina", "AS": "American Samoa", "AT": "Austria",
    "AU": "Australia", "AW": "Aruba", "AX": "Åland Islands",
    "AZ": "Azerbaijan",
    "BA": "Bosnia & Herzegovina", "BB": "Barbados", "BD": "Bangladesh",
    "BE": "Belgium", "BF": "Burkina Faso", "BG": "Bulgaria", "BH": "Bahrain",
    "BI": "Burundi", "BJ": "Benin", "BL": "St. Barthélemy", "BM": "Bermuda",
    "BN": "Brunei", "BO": "Bolivia", "BQ": "Caribbean Netherlands",
    "BR": "Brazil", "BS": "Bahamas", "BT": "Bhutan", "BV": "Bouvet Island",
    "BW": "Botswana", "BY": "Belarus", "BZ": "Belize",
    "CA": "Canada", "CC": "Cocos (Keeling) Islands", "CD": "Congo - Kinshasa",
    "CF": "Central African Republic", "CG": "Congo - Brazzaville",
    "CH": "Switzerland", "CI": "Côte d’Ivoire", "CK": "Cook Islands",
    "CL": "Chile", "CM": "Cameroon", "CN": "China", "CO": "Colombia",
    "CP": "Clipperton Island", "CR": "Costa Rica", "CU": "Cuba",
    "CV": "Cape Verde", "CW": "Curaçao", "CX": "Christmas Island",
    "CY": "Cyprus", "CZ": "Czechia",
    "DE": "Germany", "DG": "Diego Garcia", "DJ": "Djibouti", "DK": "Denmark",
    "DM": "Dominica", "DO": "Dominican Republic", "DZ": "Algeria",
    "EA": "Ceuta & Melilla", "EC": "Ecuador", "EE": "Estonia", "EG": "Egypt",
    "EH": "Western Sahara", "ER": "Eritrea", "ES": "Spain", "ET": "Ethiopia",
    "EU": "European Union",
    "FI": "Finland", "FJ": "Fiji", "FK": "Falkland Islands",
    "FM": "Micronesia", "FO": "Faroe Islands", "FR": "France",
    "GA": "Gabon", "GB": "United Kingdom", "GD": "Grenada", "GE": "Georgia",
    "GF": "French Guiana", "GG": "Guernsey", "GH": "Ghana", "GI": "Gibraltar",
    "GL": "Greenland", "GM": "Gambia", "GN": "Guinea", "GP": "Guadeloupe",
    "GQ": "Equatorial Guinea", "GR": "Greece",
    "GS": "South Georgia & South Sandwich Islands", "GT": "Guatemala",
    "GU": "Guam", "GW": "Guinea-Bissau", "GY": "Guyana",
    "HK": "Hong Kong SAR China", "HM": "Heard & McDonald Islands",
    "HN": "Honduras", "HR": "Croatia", "HT": "Haiti", "HU": "Hungary",
    "IC": "Canary Islands", "ID": "Indonesia", "IE": "Ireland",
    "IL": "Israel", "IM": "Isle of Man", "IN": "India",
    "IO": "British Indian Ocean Territory", "IQ": "Iraq", "IR": "Iran",
    "IS": "Iceland", "IT": "Italy",
    "JE": "Jersey", "JM": "Jamaica", "JO": "Jordan", "JP": "Japan",
    "KE": "Kenya", "KG": "Kyrgyzstan", "KH": "Cambodia", "KI": "Kiribati",
    "KM": "Comoros", "KN": "St. Kitts & Nevis", "KP": "North Korea",
    "KR": "South Korea", "KW": "Kuwait", "KY": "Cayman Islands",
    "KZ": "Kazakhstan",
    "LA": "Laos", "LB": "Lebanon", "LC": "St. Lucia", "LI": "Liechtenstein",
    "LK": "Sri Lanka", "LR": "Liberia", "LS": "Lesotho", "LT": "Lithuania",
    "LU": "Luxembourg", "LV": "Latvia", "LY": "Libya",
    "MA": "Morocco", "MC": "Monaco", "MD": "Moldova", "ME": "Montenegro",
    "MF": "St. Martin", "MG": "Madagascar", "MH": "Marshall Islands",
    "MK": "North Macedonia", "ML": "Mali", "MM": "Myanmar (Burma)",
    "MN": "Mongolia", "MO": "Macao SAR China", "MP": "Northern Mariana Islands",
    "MQ": "Martinique", "MR": "Mauritania", "MS": "Montserrat", "MT": "Malta",
    "MU": "Mauritius", "MV": "Maldives", "MW": "Malawi", "MX": "Mexico",
    "MY": "Malaysia", "MZ": "Mozambique",
    "NA": "Namibia", "NC": "New Caledonia", "NE": "Niger",
    "NF": "Norfolk Island", "NG": "Nigeria", "NI": "Nicaragua",
    "NL": "Netherlands", "NO": "Norway", "NP": "Nepal", "NR": "Nauru",
    "NU": "Niue", "NZ": "New Zealand",
    "OM": "Oman",
    "PA": "Panama", "PE": "Peru", "PF": "French Polynesia",
    "PG": "Papua New Guinea", "PH": "Philippines", "PK": "Pakistan",
    "PL": "Poland", "PM": "St. Pierre & Miquelon", "PN": "Pitcairn Islands",
    "PR": "Puerto Rico", "PS": "Palestinian Territories", "PT": "Portugal",
    "PW": "Palau", "PY": "Paraguay",
    "QA": "Qatar",
    "RE": "Réunion", "RO": "Romania", "RS": "Serbia", "RU": "Russia",
    "RW": "Rwanda",
    "SA": "Saudi Arabia", "SB": "Solomon Islands", "SC": "Seychelles",
    "SD": "Sudan", "SE": "Sweden", "SG": "Singapore", "SH": "St. Helena",
    "SI": "Slovenia", "SJ": "Svalbard & Jan Mayen", "SK": "Slovakia",
    "SL": "Sierra Leone", "SM": "San Marino", "SN": "Senegal",
    "SO": "Somalia", "SR": "Suriname", "SS": "South Sudan",
    "ST": "São Tomé & Príncipe", "SV": "El Salvador", "SX": "Sint Maarten",
    "SY": "Syria", "SZ": "Eswatini",
    "TA": "Tristan da Cunha", "TC": "Turks & Caicos Islands", "TD": "Chad",
    "TF": "French Southern Territories", "TG": "Togo", "TH": "Thailand",
    "TJ": "Tajikistan", "TK": "Tokelau", "TL": "Timor-Leste",
    "TM": "Turkmenistan", "TN": "Tunisia", "TO": "Tonga", "TR": "Türkiye",
    "TT": "Trinidad & Tobago", "TV": "Tuvalu", "TW": "Taiwan",
    "TZ": "Tanzania",
    "UA": "Ukraine", "UG": "Uganda", "UM": "U.S. Outlying Islands",
    "UN": "United Nations", "US": "United States", "UY": "Uruguay",
    "UZ": "Uzbekistan",
    "VA": "Vatican City", "VC": "St. Vincent & Grenadines", "VE": "Venezuela",
    "VG": "British Virgin Islands", "VI": "U.S. Virgin Islands",
    "VN": "Vietnam", "VU": "Vanuatu",
    "WF": "Wallis & Futuna", "WS": "Samoa",
    "XK": "Kosovo",
    "YE": "Yemen", "YT": "Mayotte",
    "ZA": "South Africa", "ZM": "Zambia", "ZW": "Zimbabwe",
    # Subdivisions
    "GB-ENG": "England", "GB-SCT": "Scotland", "GB-WLS": "Wales",
}


def normalize_region_code(code: str) -> str:
    """Return *code* upper-cased, with ``_`` and missing dashes fixed.

    ``"ke"`` -> ``"KE"``, ``"gbeng"`` -> ``"GB-ENG"``, ``"gb_sct"`` -> ``"GB-SCT"``.
    """
    code = code.strip().upper().replace("_", "-")
    if len(code) > 2 and "-" not in code:
        code = f"{code[:2]}-{code[2:]}"
    return code


def region_code(chars: str) -> str | None:
    """Return the normalized region code of a flag emoji, or None.

    Returns None for anything that is not a regional indicator pair or a
    well-formed subdivision tag sequence.
    """
    cps = [ord(ch) for ch in chars]

    if len(cps) == 2 and all(REGIONAL_INDICATOR_A <= cp <= REGIONAL_INDICATOR_Z for cp in cps):
        return "".join(chr(cp - REGIONAL_INDICATOR_A + ord("A")) for cp in cps)

    if len(cps) >= 4 and cps[0] == BLACK_FLAG and cps[-1] == CANCEL_TAG:
        letters = []
        for cp in cps[1:-1]:
            if TAG_SMALL_A <= cp <= TAG_SMALL_Z or TAG_DIGIT_ZERO <= cp <= TAG_DIGIT_NINE:
                letters.append(chr(cp - 0xE0000))
            else:
                return None
        if len(letters) < 3:
            return None
        return normalize_region_code("".join(letters))

    return None


def is_flag(chars: str) -> bool:
    return region_code(chars) is not None


def flag_name(code: str) -> str | None:
    """Return ``"Flag - <Name>"`` for a region code, or None if unknown."""
    key = normalize_region_code(code)
    name = FLAG_NAMES.get(key)
    if name is None:
        logger.debug("flag_name: no override for region %s", key)
        return None
    logger.trace("flag_name: %s -> %s", key, name)  # type: ignore[attr-defined]
    return FLAG_NAME_PREFIX + name


def flag_for_region(code: str) -> str:
    """Return the flag emoji for a region code (inverse of :func:`region_code`)."""
    key = normalize_region_code(code)
    country, dash, subdivision = key.partition("-")
    if dash and not subdivision:
        raise ValueError(f"Invalid region code: {code!r}")
    if len(country) != 2 or not country.isascii() or not country.isalpha():
        raise ValueError(f"Invalid region code: {code!r}")

    if subdivision:
        # ISO 3166-2 suffixes are one to three letters or digits
        if len(subdivision) > 3 or not subdivision.isascii() or not subdivision.isalnum():
            raise ValueError(f"Invalid region code: {code!r}")
        tags = "".join(chr(0xE0000 + ord(ch)) for ch in (country + subdivision).lower())
        return chr(BLACK_FLAG) + tags + chr(CANCEL_TAG)

    return "".join(chr(REGIONAL_INDICATOR_A + ord(ch) - ord("A")) for ch in country)
