"""Built-in demo archive shown until real content is published."""
from __future__ import annotations

import copy
from typing import Any, Dict, List

UNSPLASH = "https://images.unsplash.com/photo-{}?w={}&q=80"


def _image(image_id: str, photo: str, caption: str, time: str, weather: str, tag: str, width: int = 800) -> Dict[str, Any]:
    return {
        "id": image_id,
        "src": UNSPLASH.format(photo, width),
        "type": "image",
        "caption": caption,
        "time": time,
        "weather": weather,
        "tag": tag,
    }


DEMO_DAYS: List[Dict[str, Any]] = [
    {
        "date": "2025-06-14",
        "is_hero": True,
        "hero_index": 2,
        "location": "Torrey Pines, San Diego",
        "lat": 32.9184,
        "lng": -117.2536,
        "images": [
            _image("s1", "1506905925346-21bda4d32df4", "First light over the ridge", "05:47", "58°F · Clear · Wind SW 6mph", "sunrise"),
            _image("s2", "1470252649378-9c29740c9fa8", "The horizon holds its breath", "05:53", "59°F · Clear · Wind SW 6mph", "sunrise"),
            _image("s3", "1500534314209-a25ddb2bd429", "Vertical light", "06:01", "60°F · Clear", "sunrise", width=600),
            _image("s4", "1464822759023-fed622ff2c3b", "Golden wash on the water", "06:14", "61°F · Clear", "sunrise"),
            _image("s5", "1490750967868-88df5691cc51", "The pink hour", "06:28", "62°F · Partly cloudy", "sunrise"),
            _image("u1", "1495616811223-4d98c6e9c869", "Last embers", "20:11", "68°F · Clear · Wind NW 12mph", "sunset"),
            _image("u2", "1418065460487-3e41a6c84dc5", "Afterglow lingers", "20:34", "65°F · Clear", "sunset"),
            _image("u3", "1501854140801-50d01698950b", "Vertical last light", "20:39", "64°F · Clear", "sunset", width=600),
        ],
    },
    {
        "date": "2025-06-13",
        "is_hero": False,
        "location": "La Jolla Cove, San Diego",
        "lat": 32.8509,
        "lng": -117.2719,
        "images": [
            _image("a1", "1531366936337-7c912a4589a7", "Marine layer burns off", "06:02", "55°F · Fog · Wind W 8mph", "sunrise"),
            _image("a2", "1504701954957-2010ec3bcec1", "Through the fog", "06:18", "56°F · Fog clearing", "sunrise"),
            _image("b1", "1529963183134-61a90db47eaf", "Dusk palette", "19:58", "64°F · Clear · Wind NW 10mph", "sunset"),
            _image("b2", "1519046904884-53103b34b206", "Tide retreats", "20:05", "63°F · Clear", "sunset"),
            _image("b3", "1433086966358-54859d0ed716", "Waterfall light", "20:39", "61°F · Clear", "sunset"),
        ],
    },
    {
        "date": "2025-06-12",
        "is_hero": False,
        "location": "Ocean Beach, San Diego",
        "lat": 32.7484,
        "lng": -117.2503,
        "images": [
            _image("c1", "1494059980473-813e73ee784b", "Pre-dawn stillness", "05:51", "52°F · Clear · Wind calm", "sunrise"),
            _image("c2", "1448375240586-882707db888b", "Forest edge", "06:08", "54°F · Clear", "sunrise"),
            _image("d1", "1500375592092-40eb2168fd21", "Waves catch the last light", "20:28", "61°F · Breezy · Wind NW 18mph", "sunset"),
        ],
    },
]


def get_demo_days() -> List[Dict[str, Any]]:
    """Return a fresh copy of the demo archive."""
    return copy.deepcopy(DEMO_DAYS)
