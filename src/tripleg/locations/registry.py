"""
Static airport/city → timezone registry.

Parsers that can extract an airport code use `lookup_zone` to give that leg its own
timezone instead of the caller's default. `CITY_AIRPORTS` maps display city names to a
representative airport; it backs the UI's location pickers and is not read by parsers.

Both tables are compiled-in constants wrapped in read-only mappings. Adding a code or
city is a data change here, nothing else.
"""

from __future__ import annotations

from types import MappingProxyType


_AIRPORT_TIMEZONES: dict[str, str] = {
    # US Eastern
    "IAD": "America/New_York",  # Washington Dulles
    "DCA": "America/New_York",  # Washington Reagan
    "JFK": "America/New_York",  # New York JFK
    "LGA": "America/New_York",  # New York LaGuardia
    "EWR": "America/New_York",  # Newark
    "BOS": "America/New_York",  # Boston
    "PIT": "America/New_York",  # Pittsburgh
    "PHL": "America/New_York",  # Philadelphia
    "BWI": "America/New_York",  # Baltimore
    "CLT": "America/New_York",  # Charlotte
    "ATL": "America/New_York",  # Atlanta
    "MIA": "America/New_York",  # Miami
    "MCO": "America/New_York",  # Orlando
    "FLL": "America/New_York",  # Fort Lauderdale
    "TPA": "America/New_York",  # Tampa
    "JAX": "America/New_York",  # Jacksonville
    "CHS": "America/New_York",  # Charleston
    "SAV": "America/New_York",  # Savannah
    "ORF": "America/New_York",  # Norfolk
    "RIC": "America/New_York",  # Richmond
    "DTW": "America/Detroit",  # Detroit
    "CLE": "America/New_York",  # Cleveland
    "CVG": "America/New_York",  # Cincinnati
    "RDU": "America/New_York",  # Raleigh-Durham
    "IND": "America/Indiana/Indianapolis",  # Indianapolis
    # US Central
    "ORD": "America/Chicago",  # Chicago O'Hare
    "MDW": "America/Chicago",  # Chicago Midway
    "DFW": "America/Chicago",  # Dallas/Fort Worth
    "DAL": "America/Chicago",  # Dallas Love Field
    "IAH": "America/Chicago",  # Houston Intercontinental
    "HOU": "America/Chicago",  # Houston Hobby
    "AUS": "America/Chicago",  # Austin
    "SAT": "America/Chicago",  # San Antonio
    "MSY": "America/Chicago",  # New Orleans
    "BNA": "America/Chicago",  # Nashville
    "MEM": "America/Chicago",  # Memphis
    "STL": "America/Chicago",  # St. Louis
    "MCI": "America/Chicago",  # Kansas City
    "MSP": "America/Chicago",  # Minneapolis
    "MKE": "America/Chicago",  # Milwaukee
    "DSM": "America/Chicago",  # Des Moines
    "OMA": "America/Chicago",  # Omaha
    "OKC": "America/Chicago",  # Oklahoma City
    "TUL": "America/Chicago",  # Tulsa
    "LIT": "America/Chicago",  # Little Rock
    "BHM": "America/Chicago",  # Birmingham
    "JAN": "America/Chicago",  # Jackson
    # US Mountain (Arizona does not observe DST)
    "DEN": "America/Denver",  # Denver
    "PHX": "America/Phoenix",  # Phoenix
    "TUS": "America/Phoenix",  # Tucson
    "ABQ": "America/Denver",  # Albuquerque
    "SLC": "America/Denver",  # Salt Lake City
    "BOI": "America/Boise",  # Boise
    "ELP": "America/Denver",  # El Paso
    "COS": "America/Denver",  # Colorado Springs
    "GJT": "America/Denver",  # Grand Junction
    "ASE": "America/Denver",  # Aspen
    "DRO": "America/Denver",  # Durango
    "BZN": "America/Denver",  # Bozeman
    # US Pacific
    "LAX": "America/Los_Angeles",  # Los Angeles
    "SFO": "America/Los_Angeles",  # San Francisco
    "SAN": "America/Los_Angeles",  # San Diego
    "OAK": "America/Los_Angeles",  # Oakland
    "SJC": "America/Los_Angeles",  # San Jose
    "SAC": "America/Los_Angeles",  # Sacramento Executive
    "SMF": "America/Los_Angeles",  # Sacramento
    "ONT": "America/Los_Angeles",  # Ontario
    "BUR": "America/Los_Angeles",  # Burbank
    "LGB": "America/Los_Angeles",  # Long Beach
    "SNA": "America/Los_Angeles",  # Santa Ana / Orange County
    "PSP": "America/Los_Angeles",  # Palm Springs
    "LAS": "America/Los_Angeles",  # Las Vegas
    "RNO": "America/Los_Angeles",  # Reno
    "SEA": "America/Los_Angeles",  # Seattle
    "PDX": "America/Los_Angeles",  # Portland
    "GEG": "America/Los_Angeles",  # Spokane
    # Alaska
    "ANC": "America/Anchorage",  # Anchorage
    "FAI": "America/Anchorage",  # Fairbanks
    "JNU": "America/Juneau",  # Juneau
    # Hawaii
    "HNL": "Pacific/Honolulu",  # Honolulu
    "OGG": "Pacific/Honolulu",  # Kahului
    "KOA": "Pacific/Honolulu",  # Kona
    "LIH": "Pacific/Honolulu",  # Lihue
    # Canada
    "YYZ": "America/Toronto",  # Toronto
    "YUL": "America/Toronto",  # Montreal
    "YVR": "America/Vancouver",  # Vancouver
    "YYC": "America/Edmonton",  # Calgary
    # Europe
    "LHR": "Europe/London",  # London Heathrow
    "LGW": "Europe/London",  # London Gatwick
    "DUB": "Europe/Dublin",  # Dublin
    "CDG": "Europe/Paris",  # Paris Charles de Gaulle
    "FRA": "Europe/Berlin",  # Frankfurt
    "MUC": "Europe/Berlin",  # Munich
    "AMS": "Europe/Amsterdam",  # Amsterdam
    "MAD": "Europe/Madrid",  # Madrid
    "BCN": "Europe/Madrid",  # Barcelona
    "LIS": "Europe/Lisbon",  # Lisbon
    "FCO": "Europe/Rome",  # Rome
    "MXP": "Europe/Rome",  # Milan
    "ZRH": "Europe/Zurich",  # Zurich
    "VIE": "Europe/Vienna",  # Vienna
    "BRU": "Europe/Brussels",  # Brussels
    "ARN": "Europe/Stockholm",  # Stockholm
    "CPH": "Europe/Copenhagen",  # Copenhagen
    "OSL": "Europe/Oslo",  # Oslo
    "HEL": "Europe/Helsinki",  # Helsinki
    "KEF": "Atlantic/Reykjavik",  # Reykjavik
    "WAW": "Europe/Warsaw",  # Warsaw
    "PRG": "Europe/Prague",  # Prague
    "BUD": "Europe/Budapest",  # Budapest
    "ATH": "Europe/Athens",  # Athens
    "IST": "Europe/Istanbul",  # Istanbul
    "DME": "Europe/Moscow",  # Moscow Domodedovo
    "SVO": "Europe/Moscow",  # Moscow Sheremetyevo
    "LED": "Europe/Moscow",  # St. Petersburg
    # Asia
    "NRT": "Asia/Tokyo",  # Tokyo Narita
    "HND": "Asia/Tokyo",  # Tokyo Haneda
    "KIX": "Asia/Tokyo",  # Osaka Kansai
    "ICN": "Asia/Seoul",  # Seoul Incheon
    "GMP": "Asia/Seoul",  # Seoul Gimpo
    "PEK": "Asia/Shanghai",  # Beijing
    "PVG": "Asia/Shanghai",  # Shanghai Pudong
    "SHA": "Asia/Shanghai",  # Shanghai Hongqiao
    "CAN": "Asia/Shanghai",  # Guangzhou
    "SZX": "Asia/Shanghai",  # Shenzhen
    "HKG": "Asia/Hong_Kong",  # Hong Kong
    "TPE": "Asia/Taipei",  # Taipei
    "SIN": "Asia/Singapore",  # Singapore
    "BKK": "Asia/Bangkok",  # Bangkok
    "KUL": "Asia/Kuala_Lumpur",  # Kuala Lumpur
    "CGK": "Asia/Jakarta",  # Jakarta
    "MNL": "Asia/Manila",  # Manila
    "DEL": "Asia/Kolkata",  # Delhi
    "BOM": "Asia/Kolkata",  # Mumbai
    "BLR": "Asia/Kolkata",  # Bangalore
    "HYD": "Asia/Kolkata",  # Hyderabad
    "CCU": "Asia/Kolkata",  # Kolkata
    # Australia / Oceania
    "SYD": "Australia/Sydney",  # Sydney
    "MEL": "Australia/Melbourne",  # Melbourne
    "BNE": "Australia/Brisbane",  # Brisbane
    "PER": "Australia/Perth",  # Perth
    "ADL": "Australia/Adelaide",  # Adelaide
    "AKL": "Pacific/Auckland",  # Auckland
    "WLG": "Pacific/Auckland",  # Wellington
    # Middle East
    "DXB": "Asia/Dubai",  # Dubai
    "AUH": "Asia/Dubai",  # Abu Dhabi
    "DOH": "Asia/Qatar",  # Doha
    "RUH": "Asia/Riyadh",  # Riyadh
    "JED": "Asia/Riyadh",  # Jeddah
    "TLV": "Asia/Jerusalem",  # Tel Aviv
    "AMM": "Asia/Amman",  # Amman
    "BEY": "Asia/Beirut",  # Beirut
    # Africa
    "JNB": "Africa/Johannesburg",  # Johannesburg
    "CPT": "Africa/Johannesburg",  # Cape Town
    "CAI": "Africa/Cairo",  # Cairo
    "NBO": "Africa/Nairobi",  # Nairobi
    "LOS": "Africa/Lagos",  # Lagos
    "ACC": "Africa/Accra",  # Accra
    "DAR": "Africa/Dar_es_Salaam",  # Dar es Salaam
    # Latin America
    "GRU": "America/Sao_Paulo",  # Sao Paulo
    "GIG": "America/Sao_Paulo",  # Rio de Janeiro
    "BSB": "America/Sao_Paulo",  # Brasilia
    "EZE": "America/Argentina/Buenos_Aires",  # Buenos Aires
    "SCL": "America/Santiago",  # Santiago
    "LIM": "America/Lima",  # Lima
    "BOG": "America/Bogota",  # Bogota
    "MEX": "America/Mexico_City",  # Mexico City
    "GDL": "America/Mexico_City",  # Guadalajara
    "MTY": "America/Monterrey",  # Monterrey
    "CUN": "America/Cancun",  # Cancun
    "GUA": "America/Guatemala",  # Guatemala City
    "SJO": "America/Costa_Rica",  # San Jose (Costa Rica)
    "PTY": "America/Panama",  # Panama City
    "CCS": "America/Caracas",  # Caracas
    "UIO": "America/Guayaquil",  # Quito
    "GYE": "America/Guayaquil",  # Guayaquil
    "ASU": "America/Asuncion",  # Asuncion
    "MVD": "America/Montevideo",  # Montevideo
    "SJU": "America/Puerto_Rico",  # San Juan
}

_CITY_AIRPORTS: dict[str, str] = {
    "Washington": "IAD",
    "Washington, DC": "IAD",
    "New York": "JFK",
    "New York/Newark": "EWR",
    "Newark": "EWR",
    "Boston": "BOS",
    "Pittsburgh": "PIT",
    "Philadelphia": "PHL",
    "Baltimore": "BWI",
    "Charlotte": "CLT",
    "Atlanta": "ATL",
    "Miami": "MIA",
    "Orlando": "MCO",
    "Fort Lauderdale": "FLL",
    "Tampa": "TPA",
    "Detroit": "DTW",
    "Chicago": "ORD",
    "Dallas": "DFW",
    "Houston": "IAH",
    "Austin": "AUS",
    "New Orleans": "MSY",
    "Nashville": "BNA",
    "Minneapolis": "MSP",
    "Denver": "DEN",
    "Phoenix": "PHX",
    "Salt Lake City": "SLC",
    "Las Vegas": "LAS",
    "Los Angeles": "LAX",
    "San Francisco": "SFO",
    "San Diego": "SAN",
    "Seattle": "SEA",
    "Portland": "PDX",
    "Anchorage": "ANC",
    "Honolulu": "HNL",
    "Toronto": "YYZ",
    "Vancouver": "YVR",
    "London": "LHR",
    "Dublin": "DUB",
    "Paris": "CDG",
    "Frankfurt": "FRA",
    "Munich": "MUC",
    "Amsterdam": "AMS",
    "Madrid": "MAD",
    "Barcelona": "BCN",
    "Rome": "FCO",
    "Zurich": "ZRH",
    "Istanbul": "IST",
    "Tokyo": "HND",
    "Seoul": "ICN",
    "Beijing": "PEK",
    "Shanghai": "PVG",
    "Hong Kong": "HKG",
    "Taipei": "TPE",
    "Singapore": "SIN",
    "Bangkok": "BKK",
    "Delhi": "DEL",
    "Mumbai": "BOM",
    "Sydney": "SYD",
    "Melbourne": "MEL",
    "Auckland": "AKL",
    "Dubai": "DXB",
    "Doha": "DOH",
    "Johannesburg": "JNB",
    "Sao Paulo": "GRU",
    "Buenos Aires": "EZE",
    "Mexico City": "MEX",
    "Cancun": "CUN",
}

AIRPORT_TIMEZONES = MappingProxyType(_AIRPORT_TIMEZONES)
CITY_AIRPORTS = MappingProxyType(_CITY_AIRPORTS)


def lookup_zone(code: str | None) -> str | None:
    """Map an airport code (any case, surrounding whitespace ok) to an IANA zone, or None."""
    if not code:
        return None
    return AIRPORT_TIMEZONES.get(str(code).strip().upper())


def has_zone(code: str | None) -> bool:
    return lookup_zone(code) is not None


def lookup_city_airport(city: str | None) -> str | None:
    """Map an exact (trimmed) city name to its representative airport code, or None."""
    if not city:
        return None
    return CITY_AIRPORTS.get(str(city).strip())


def zone_for_city(city: str | None) -> str | None:
    return lookup_zone(lookup_city_airport(city))
