"""
Sample creator and hotel profiles for demonstration runs.
"""

from typing import List

from .profiles import Profile

SAMPLE_CREATORS = [
    {
        'id': 'c1',
        'name': 'Jessica Martinez',
        'type': 'creator',
        'description': 'Travel and lifestyle creator specializing in boutique hotel experiences '
                       'and authentic storytelling.',
        'tags': ['Travel', 'Lifestyle', 'Boutique', 'Photography'],
        'niche': 'Travel & Lifestyle',
        'location': 'Los Angeles, CA',
        'followers': '48K',
        'engagement': '4.2%',
    },
    {
        'id': 'c2',
        'name': 'David Reyes',
        'type': 'creator',
        'description': 'Adventure and photography creator who turns hotel stays into cinematic '
                       'short-form content.',
        'tags': ['Adventure', 'Photography', 'Cinematic', 'Urban'],
        'niche': 'Adventure & Photography',
        'location': 'New York, NY',
        'followers': '112K',
        'engagement': '5.8%',
    },
    {
        'id': 'c3',
        'name': 'Sophia Patel',
        'type': 'creator',
        'description': 'Food and hospitality creator known for her honest hotel reviews and '
                       'in-depth dining coverage.',
        'tags': ['Food', 'Hospitality', 'Reviews', 'Wellness'],
        'niche': 'Food & Hospitality',
        'location': 'Miami, FL',
        'followers': '73K',
        'engagement': '6.1%',
    },
    {
        'id': 'c4',
        'name': 'Marcus Chen',
        'type': 'creator',
        'description': 'Luxury travel vlogger creating high-quality drone footage and immersive '
                       'hotel walkthroughs.',
        'tags': ['Luxury', 'Drone', 'Video', 'Travel'],
        'niche': 'Luxury Travel',
        'location': 'San Francisco, CA',
        'followers': '95K',
        'engagement': '4.7%',
    },
    {
        'id': 'c5',
        'name': 'Aria Thompson',
        'type': 'creator',
        'description': 'Wellness and mindfulness influencer who creates calming spa and retreat '
                       'content for health-conscious travelers.',
        'tags': ['Wellness', 'Spa', 'Mindfulness', 'Nature'],
        'niche': 'Wellness & Mindfulness',
        'location': 'Denver, CO',
        'followers': '61K',
        'engagement': '5.3%',
    },
    {
        'id': 'c6',
        'name': 'Liam Brooks',
        'type': 'creator',
        'description': 'Urban explorer and nightlife photographer capturing the energy of city '
                       'hotels, rooftop bars, and downtown culture.',
        'tags': ['Urban', 'Nightlife', 'Photography', 'City'],
        'niche': 'Urban & Nightlife',
        'location': 'Chicago, IL',
        'followers': '88K',
        'engagement': '4.9%',
    },
]

SAMPLE_HOTELS = [
    {
        'id': 'h1',
        'name': 'The Grand Lux Miami',
        'type': 'hotel',
        'description': 'Luxury waterfront hotel looking for creators to showcase their rooftop '
                       'bar and ocean-view suites.',
        'tags': ['Luxury', 'Miami', 'Waterfront', 'Nightlife'],
        'niche': 'Luxury Waterfront',
        'location': 'Miami, FL',
        'rating': '4.8',
        'collabs': '12',
    },
    {
        'id': 'h2',
        'name': 'Serenity Hills Resort',
        'type': 'hotel',
        'description': 'Mountain retreat seeking wellness and nature content creators for their '
                       'new spa launch campaign.',
        'tags': ['Wellness', 'Nature', 'Spa', 'Retreat'],
        'niche': 'Wellness Retreat',
        'location': 'Asheville, NC',
        'rating': '4.9',
        'collabs': '5',
    },
    {
        'id': 'h3',
        'name': 'Urban Edge Hotel NYC',
        'type': 'hotel',
        'description': 'Trendy boutique hotel in SoHo looking for urban lifestyle creators to '
                       'produce authentic city content.',
        'tags': ['Boutique', 'NYC', 'Urban', 'City'],
        'niche': 'Urban Boutique',
        'location': 'New York, NY',
        'rating': '4.7',
        'collabs': '20',
    },
    {
        'id': 'h4',
        'name': 'Coastal Breeze Hotel',
        'type': 'hotel',
        'description': 'Beachfront resort in Malibu seeking travel and lifestyle creators for '
                       'their summer campaign launch.',
        'tags': ['Beach', 'Malibu', 'Travel', 'Lifestyle'],
        'niche': 'Beach Resort',
        'location': 'Malibu, CA',
        'rating': '4.6',
        'collabs': '8',
    },
    {
        'id': 'h5',
        'name': 'Alpine Lodge & Spa',
        'type': 'hotel',
        'description': 'Luxury mountain lodge with world-class spa facilities, seeking wellness '
                       'and adventure creators for winter campaigns.',
        'tags': ['Luxury', 'Spa', 'Adventure', 'Nature'],
        'niche': 'Mountain Luxury',
        'location': 'Aspen, CO',
        'rating': '4.9',
        'collabs': '3',
    },
]


def sample_creators() -> List[Profile]:
    return [Profile.from_dict(entry) for entry in SAMPLE_CREATORS]


def sample_hotels() -> List[Profile]:
    return [Profile.from_dict(entry) for entry in SAMPLE_HOTELS]
