"""
Reference lists
Districts, amenities and nationalities offered by the input forms.
"""

LOCATIONS = [
    "Emirates Hills",
    "Downtown Dubai",
    "Dubai Marina",
    "Arabian Ranches",
    "JBR",
    "Palm Jumeirah",
    "Business Bay",
    "DIFC",
]

AMENITIES = [
    "Private Pool",
    "Garden",
    "Maid's Room",
    "Driver's Room",
    "Garage",
    "Gym",
    "Concierge",
    "Beach Access",
    "Golf Course Access",
    "Burj Khalifa View",
]

NATIONALITIES = [
    "Emirati",
    "British",
    "Indian",
    "Pakistani",
    "Filipino",
    "Egyptian",
    "Lebanese",
    "Jordanian",
    "American",
    "Canadian",
    "Australian",
    "German",
]


def get_reference_data() -> dict[str, list[str]]:
    """All reference lists keyed by name (copies)."""
    return {
        "locations": list(LOCATIONS),
        "amenities": list(AMENITIES),
        "nationalities": list(NATIONALITIES),
    }
