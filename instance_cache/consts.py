from typing import Final

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEFAULT_CACHE_NAME = "default"

# Fields that jointly identify a shared computer flyweight
COMPUTER_KEY_FIELDS: Final[tuple[str, ...]] = ("make", "model", "processor")

# Geocoder lookup table (normalized address -> "lat, lng")
KNOWN_COORDINATES: Final[dict[str, str]] = {
    "amsterdam": "52.3700° N, 4.8900° E",
    "london": "51.5171° N, 0.1062° W",
    "paris": "48.8742° N, 2.3470° E",
    "berlin": "52.5233° N, 13.4127° E",
}

# Backing data store for the data proxy
DATA_STORE_VALUES: Final[dict[str, str]] = {
    "1": "100",
    "2": "200",
    "3": "300",
    "4": "400",
}

# Default demo scenarios replayed by the CLI
# (make, model, processor, memory, tag)
DEFAULT_COMPUTER_REQUESTS: Final[list[tuple[str, str, str, str, str]]] = [
    ("Dell", "Studio XPS", "Intel", "5G", "Y755P"),
    ("Dell", "Studio XPS", "Intel", "6G", "X997T"),
    ("Dell", "Studio XPS", "Intel", "2G", "U8U80"),
    ("Dell", "Studio XPS", "Intel", "2G", "NT777"),
    ("Dell", "Studio XPS", "Intel", "2G", "0J88A"),
    ("HP", "Envy", "Intel", "4G", "CNU883701"),
    ("HP", "Envy", "Intel", "2G", "TXU003283"),
]

DEFAULT_GEO_REQUESTS: Final[list[str]] = [
    "Paris",
    "London",
    "London",
    "London",
    "London",
    "Amsterdam",
    "Amsterdam",
    "Amsterdam",
    "Amsterdam",
    "London",
    "London",
]

DEFAULT_DATA_REQUESTS: Final[list[str]] = ["1", "2", "2", "2", "3", "3", "4"]
