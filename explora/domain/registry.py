"""Vienna tag taxonomy.

Four layers:
1. Primary categories - user-selected themes (3-5 per location)
2. Secondary groups - user-facing filters (2-5 per location)
3. Hidden tags - algorithmic insights only
4. Contextual tags - seasonal and timing hints

Plus the mood table used by the mood matcher.
"""

from explora.domain.model.taxonomy import MoodProfile, TagCategory, TagTaxonomy
from explora.domain.value import Mood

PRIMARY_CATEGORIES: tuple[TagCategory, ...] = (
    TagCategory(
        key="CULTURE_HISTORY",
        name="Culture & History",
        tags=(
            "Monuments & Landmarks",
            "Historical Sites",
            "Archaeological Sites",
            "Memorials",
            "Religious & Spiritual Sites",
            "World Heritage Sites",
            "Ancient Architecture",
            "Historic Neighborhoods",
            "Heritage Trails",
            "Palace or Castle",
            "Famous Historical Figures",
            "Royal Sites",
            "Civil Rights Sites",
            "Political History",
            "Colonial Architecture",
            "Medieval Architecture",
            "Philanthropic Heritage",
            "Former Hospitals",
            "Baroque Architecture",
            "Library Landmark",
            "Royal Patronage",
        ),
    ),
    TagCategory(
        key="MUSEUMS_ART",
        name="Museums & Art",
        tags=(
            "Art Museums",
            "History Museums",
            "Science Museums",
            "Modern Art Spaces",
            "Niche Collections",
            "Rotating Exhibitions",
            "Temporary Galleries",
            "Interactive Museums",
            "Photography Exhibits",
            "Immersive Installations",
            "Children's Museums",
            "Open-Air Museums",
            "Local Artist Features",
            "Permanent Collections",
            "Cabinet of Curiosities",
            "Unusual Exhibits",
            "Animal-Themed",
            "Contemporary Culture",
            "Subversive Themes",
        ),
    ),
    TagCategory(
        key="PARKS_NATURE",
        name="Parks & Nature",
        tags=(
            "Urban Parks",
            "Botanical Gardens",
            "Riverside Walks",
            "Forest Trails",
            "Wildlife Areas",
            "Green Escape",
            "Shaded Areas",
            "Natural Water Features",
            "Urban Biodiversity",
            "Outdoor Sculpture Gardens",
            "Picnic Friendly",
            "Cherry Blossom Spots",
            "Seasonal Highlights",
            "Dog-Friendly Zones",
            "Calm Walks",
            "Converted Railway Space",
            "Multi-Use Park",
            "Local Weekend Spot",
            "Event-Driven Park",
            "International Exhibitions",
        ),
    ),
    TagCategory(
        key="URBAN_EXPLORATION",
        name="Urban Exploration",
        tags=(
            "Iconic Architecture",
            "Public Squares",
            "Neighborhood Walks",
            "Bridges & Tunnels",
            "Industrial Heritage",
            "Historic Streets",
            "Urban Photo Spots",
            "Rooftop Access",
            "Open Courtyards",
            "Covered Passages",
            "Famous Boulevards",
            "Decorative Facades",
            "City Gates",
            "Artists' District",
            "Silk Industry Heritage",
            "Urban Redevelopment",
            "Graffiti Corridors",
        ),
    ),
    TagCategory(
        key="CREATIVE_STREET",
        name="Creative & Street Culture",
        tags=(
            "Street Art",
            "Design Installations",
            "Creative Hubs",
            "Artisan Markets",
            "Indie Galleries",
            "Local Craft Centers",
            "Public Art Projects",
            "Community Murals",
            "Experimental Art Spaces",
            "Independent Art Shops",
            "Open Studios",
            "Zines & DIY Culture",
            "Graffiti Corridors",  # Also listed under Urban Exploration
            "Artist Collectives",
            "Squatter Art Spaces",
            "DIY Events",
            "Reclaimed Spaces",
            "Artist Residency Complex",
        ),
    ),
    TagCategory(
        key="SCENIC_PANORAMIC",
        name="Scenic & Panoramic",
        tags=(
            "Rooftop Views",
            "Hilltop Lookouts",
            "Riverbanks",
            "Sunset Spots",
            "Panoramic Vistas",
            "Skyline Overlook",
            "Viewpoints with Seating",
            "Photogenic Angles",
            "Elevated Walkways",
            "Cityscape Reflections",
            "Observation Decks",
            "Open-Air Platforms",
            "Quiet Lookout",
            "Locals' Favorite View",
            "360° View",
            "Religious Panoramic Spot",
        ),
    ),
)

SECONDARY_GROUPS: tuple[TagCategory, ...] = (
    TagCategory(
        key="ACCESSIBILITY_EFFORT",
        name="Accessibility & Effort",
        tags=(
            "Wheelchair Accessible",
            "Steep Terrain",
            "Lots of Stairs",
            "Elder-Friendly",
            "Kid-Friendly",
        ),
    ),
    TagCategory(
        key="TIME_COMMITMENT",
        name="Time Commitment",
        tags=(
            "Quick Stop (<15 min)",
            "1-Hour Visit",
            "Half-Day Activity",
            "Full-Day Attraction",
        ),
    ),
    TagCategory(
        key="WEATHER_SUITABILITY",
        name="Weather Suitability",
        tags=("Indoor", "Outdoor", "Good for Rainy Days", "Best in Sunshine"),
    ),
    TagCategory(
        key="MOBILITY_CONTEXT",
        name="Mobility Context",
        tags=(
            "Walkable From Center",
            "Requires Public Transport",
            "Off-the-Beaten Path",
        ),
    ),
    TagCategory(
        key="AUDIENCE_SUITABILITY",
        name="Audience Suitability",
        tags=(
            "Great for Families",
            "Solo-Friendly",
            "Group-Friendly",
            "Romantic Spot",
        ),
    ),
)

HIDDEN_TAGS: tuple[str, ...] = (
    "FOMO Magnet",
    "High Tourist Traffic",
    "Quiet Retreat",
    "Cultural Immersion",
    "Relaxing Vibe",
    "Panoramic Photo Spot",
    "Educational Value",
    "Experiential",
    "Gamified Content Available",
    "Local Favorite",
    "Overrated",
    "Instagram Hotspot",
    "Authentic Experience",
    "Tourist Trap",
    "Hidden Gem Verified",
    "Crowd-Sensitive",
    "Weather-Dependent",
    "Time-Sensitive Visit",
)

CONTEXTUAL_TAGS: tuple[str, ...] = (
    "Peak Season Only",
    "Off-Season Recommended",
    "Event Nearby",
    "Open During Holidays",
    "Shaded in Summer",
    "Best in Spring",
    "Sunset Spot",
    "Evening Recommended",
    "Weekend Crowded",
    "Early Morning Best",
    "Rainy Day Alternative",
    "Summer Festival Venue",
    "Winter Warm Spot",
    "Holiday Decorations",
    "Seasonal Exhibition",
)

MOODS: tuple[MoodProfile, ...] = (
    MoodProfile(
        mood=Mood.ROMANTIC,
        description="Scenic spots for intimate moments",
        fragments=("Scenic & Panoramic", "Sunset Spots", "Quiet Lookout", "Riverbanks"),
    ),
    MoodProfile(
        mood=Mood.ADVENTUROUS,
        description="Urban exploration and hidden gems",
        fragments=(
            "Urban Exploration",
            "Off-the-Beaten Path",
            "Bridges & Tunnels",
            "Rooftop Access",
        ),
    ),
    MoodProfile(
        mood=Mood.PEACEFUL,
        description="Calm spaces for relaxation",
        fragments=(
            "Parks & Nature",
            "Shaded Areas",
            "Calm Walks",
            "Religious & Spiritual Sites",
        ),
    ),
    MoodProfile(
        mood=Mood.CURIOUS,
        description="Museums and learning experiences",
        fragments=(
            "Museums & Art",
            "Interactive Museums",
            "Historical Sites",
            "Niche Collections",
        ),
    ),
    MoodProfile(
        mood=Mood.ENERGETIC,
        description="Vibrant culture and street life",
        fragments=(
            "Creative & Street Culture",
            "Public Squares",
            "Artisan Markets",
            "Event-Driven Park",
        ),
    ),
    MoodProfile(
        mood=Mood.CONTEMPLATIVE,
        description="Historic and spiritual places",
        fragments=(
            "Culture & History",
            "Heritage Trails",
            "Library Landmark",
            "Quiet Retreat",
        ),
    ),
)

VIENNA_TAXONOMY = TagTaxonomy(
    primary_categories=PRIMARY_CATEGORIES,
    secondary_groups=SECONDARY_GROUPS,
    hidden_tags=HIDDEN_TAGS,
    contextual_tags=CONTEXTUAL_TAGS,
    moods=MOODS,
)
