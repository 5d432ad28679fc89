"""Bundled Vienna catalog used when no catalog file is configured."""

VIENNA_LOCATIONS: list[dict] = [
    {
        "id": "cafe-central",
        "name": "Café Central",
        "description": (
            "Historic Viennese coffeehouse with beautiful architecture and "
            "amazing pastries. Perfect for a morning coffee break."
        ),
        "category": "Café",
        "rating": 4.8,
        "address": "Herrengasse 14, 1010 Vienna",
        "coordinates": {"lat": 48.2104, "lng": 16.3655},
        "image": "https://images.unsplash.com/photo-1554118811-1e0d58224f24?w=400&h=300&fit=crop",
        "tags": {
            "primary": [
                "Historical Sites",
                "Famous Historical Figures",
                "Decorative Facades",
            ],
            "secondary": [
                "1-Hour Visit",
                "Indoor",
                "Good for Rainy Days",
                "Walkable From Center",
                "Solo-Friendly",
            ],
            "hidden": ["Cultural Immersion", "High Tourist Traffic", "FOMO Magnet"],
            "contextual": ["Early Morning Best", "Winter Warm Spot"],
        },
    },
    {
        "id": "schonbrunn-palace",
        "name": "Schönbrunn Palace",
        "description": (
            "Imperial summer palace with stunning gardens and rich history. "
            "A must-visit for any Vienna trip."
        ),
        "category": "Attraction",
        "rating": 4.9,
        "address": "Schönbrunner Schloßstraße 47, 1130 Vienna",
        "coordinates": {"lat": 48.1845, "lng": 16.3122},
        "image": "https://images.unsplash.com/photo-1539037116277-4db20889f2d4?w=400&h=300&fit=crop",
        "tags": {
            "primary": [
                "Palace or Castle",
                "World Heritage Sites",
                "Royal Sites",
                "Botanical Gardens",
                "Panoramic Vistas",
            ],
            "secondary": [
                "Half-Day Activity",
                "Outdoor",
                "Requires Public Transport",
                "Great for Families",
                "Wheelchair Accessible",
            ],
            "hidden": [
                "FOMO Magnet",
                "High Tourist Traffic",
                "Educational Value",
                "Instagram Hotspot",
            ],
            "contextual": ["Best in Spring", "Weekend Crowded"],
        },
    },
    {
        "id": "naschmarkt",
        "name": "Naschmarkt",
        "description": (
            "Vibrant market with fresh produce, international cuisine, and "
            "unique finds. Great for food lovers!"
        ),
        "category": "Market",
        "rating": 4.6,
        "address": "Linke Wienzeile, 1060 Vienna",
        "coordinates": {"lat": 48.1986, "lng": 16.3632},
        "image": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=400&h=300&fit=crop",
        "tags": {
            "primary": ["Artisan Markets", "Historic Streets", "Local Craft Centers"],
            "secondary": [
                "1-Hour Visit",
                "Outdoor",
                "Walkable From Center",
                "Group-Friendly",
            ],
            "hidden": ["Authentic Experience", "Local Favorite", "Crowd-Sensitive"],
            "contextual": ["Weekend Crowded", "Early Morning Best"],
        },
    },
    {
        "id": "stadtpark",
        "name": "Stadtpark",
        "description": (
            "Beautiful urban park perfect for a relaxing stroll. Home to the "
            "famous Johann Strauss monument."
        ),
        "category": "Park",
        "rating": 4.5,
        "address": "Parkring, 1030 Vienna",
        "coordinates": {"lat": 48.2046, "lng": 16.3797},
        "image": "https://images.unsplash.com/photo-1571847140471-1d7766e825ea?w=400&h=300&fit=crop",
        "tags": {
            "primary": [
                "Urban Parks",
                "Calm Walks",
                "Shaded Areas",
                "Monuments & Landmarks",
            ],
            "secondary": [
                "1-Hour Visit",
                "Outdoor",
                "Best in Sunshine",
                "Walkable From Center",
                "Wheelchair Accessible",
            ],
            "hidden": ["Relaxing Vibe", "Quiet Retreat"],
            "contextual": ["Shaded in Summer", "Best in Spring"],
        },
    },
    {
        "id": "kahlenberg",
        "name": "Kahlenberg",
        "description": (
            "Vienna Woods hilltop with sweeping views over the city and the "
            "Danube, best reached by bus and a short forest walk."
        ),
        "category": "Viewpoint",
        "rating": 4.7,
        "address": "Am Kahlenberg, 1190 Vienna",
        "coordinates": {"lat": 48.2743, "lng": 16.3345},
        "tags": {
            "primary": [
                "Hilltop Lookouts",
                "Panoramic Vistas",
                "Sunset Spots",
                "Forest Trails",
            ],
            "secondary": [
                "Half-Day Activity",
                "Outdoor",
                "Steep Terrain",
                "Requires Public Transport",
                "Romantic Spot",
            ],
            "hidden": ["Panoramic Photo Spot", "Weather-Dependent", "Local Favorite"],
            "contextual": ["Sunset Spot", "Off-Season Recommended"],
        },
    },
    {
        "id": "donaukanal",
        "name": "Donaukanal",
        "description": (
            "Canal-side promenade lined with graffiti walls, summer bars and "
            "a constantly changing open-air gallery."
        ),
        "category": "Street Art",
        "rating": 4.4,
        "address": "Donaukanal Promenade, 1020 Vienna",
        "coordinates": {"lat": 48.2148, "lng": 16.3794},
        "tags": {
            "primary": [
                "Street Art",
                "Graffiti Corridors",
                "Riverside Walks",
                "Urban Photo Spots",
            ],
            "secondary": [
                "1-Hour Visit",
                "Outdoor",
                "Walkable From Center",
                "Solo-Friendly",
            ],
            "hidden": ["Hidden Gem Verified", "Instagram Hotspot", "Authentic Experience"],
            "contextual": ["Evening Recommended", "Summer Festival Venue"],
        },
    },
    {
        "id": "natural-history-museum",
        "name": "Natural History Museum",
        "description": (
            "Vast collections from meteorites to dinosaurs, housed in a "
            "palatial building on the Ringstraße."
        ),
        "category": "Museum",
        "rating": 4.7,
        "address": "Burgring 7, 1010 Vienna",
        "coordinates": {"lat": 48.2052, "lng": 16.3599},
        "tags": {
            "primary": [
                "Science Museums",
                "Cabinet of Curiosities",
                "Permanent Collections",
                "Iconic Architecture",
            ],
            "secondary": [
                "Half-Day Activity",
                "Indoor",
                "Good for Rainy Days",
                "Walkable From Center",
                "Kid-Friendly",
            ],
            "hidden": ["Educational Value", "Gamified Content Available"],
            "contextual": ["Rainy Day Alternative"],
        },
    },
]
