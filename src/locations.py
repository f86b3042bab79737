from dataclasses import dataclass

LASS_LAST_URL = "https://pm25.lass-net.org/data/last.php"
CAMPUS_DEVICE_ID = "B827EBC2994D"


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    api_url: str


def _lass_url(device_id: str) -> str:
    return f"{LASS_LAST_URL}?device_id={device_id}"


# Only one campus device is online; the other stations share its feed for now.
LOCATIONS: tuple[Location, ...] = (
    Location("A", "小芳堂", _lass_url(CAMPUS_DEVICE_ID)),
    Location("B", "司令台", _lass_url(CAMPUS_DEVICE_ID)),
    Location("C", "小田原", _lass_url(CAMPUS_DEVICE_ID)),
    Location("D", "腳踏車練習場", _lass_url(CAMPUS_DEVICE_ID)),
)


def default_location() -> Location:
    return LOCATIONS[0]


def get_location(location_id: str) -> Location:
    for location in LOCATIONS:
        if location.id == location_id:
            return location
    raise KeyError(location_id)
