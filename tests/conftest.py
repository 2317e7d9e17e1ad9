import pytest


def make_asteroid(name, diameter_min=0.2170475943, diameter_max=0.4853331752,
                  approaches=None):
    if approaches is None:
        approaches = [("45290298.225725659", "65260.5699103704")]
    return {
        "id": "2465633",
        "name": name,
        "estimated_diameter": {
            "kilometers": {
                "estimated_diameter_min": diameter_min,
                "estimated_diameter_max": diameter_max,
            },
            "meters": {
                "estimated_diameter_min": diameter_min * 1000,
                "estimated_diameter_max": diameter_max * 1000,
            },
        },
        "is_potentially_hazardous_asteroid": True,
        "close_approach_data": [
            {
                "close_approach_date": "2015-09-08",
                "relative_velocity": {
                    "kilometers_per_second": "18.1279360862",
                    "kilometers_per_hour": velocity,
                },
                "miss_distance": {
                    "astronomical": "0.3027469457",
                    "kilometers": distance,
                },
                "orbiting_body": "Earth",
            }
            for distance, velocity in approaches
        ],
    }


@pytest.fixture
def sample_feed():
    return {
        "links": {"self": "http://api.nasa.gov/neo/rest/v1/feed"},
        "element_count": 3,
        "near_earth_objects": {
            "2024-01-01": [make_asteroid("A"), make_asteroid("B")],
            "2024-01-02": [make_asteroid("C")],
        },
    }
