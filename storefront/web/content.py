"""
Hardcoded page content shown when the CMS has nothing for a section
"""

HERO_FALLBACK = {
    "badge": "Est. in the Heart of Vasse Village",
    "title": "Freshly Baked",
    "highlight": "Every Morning",
    "message": (
        "Welcome to Vasse Bakery, your local destination for artisanal pies, pastries, "
        "fresh bread, and premium coffee. Located in the vibrant Vasse Village, we've been "
        "serving the Margaret River region with warmth, quality, and that homely touch you can taste."
    ),
    "large_text": "Premium Coffee",
    "small_text": "Freshly brewed daily",
}

# (icon, title, lines)
LOCATION_FALLBACK = [
    ("map-pin", "Address", "12 Napoleon Promenade\nVasse, Western Australia"),
    ("clock", "Opening Hours", "Monday - Friday: 6:00 AM - 4:00 PM\nSaturday - Sunday: 6:30 AM - 3:00 PM"),
    ("phone", "Contact", "Call us for special orders\nor any inquiries"),
]

STORY_PARAGRAPHS = [
    "What started as a dream between two passionate food lovers has grown into the heart of "
    "Vasse Village. Sarah and Michael Thompson opened Vasse Bakery with a simple mission: to "
    "create a place where the community could gather over exceptional baked goods and great coffee.",
    "Every recipe tells a story, from Sarah's grandmother's sourdough starter that still lives in "
    "our kitchen today, to the innovative fusion of traditional European techniques with local "
    "Australian ingredients.",
]

STORY_MILESTONES = [
    ("2018", "The Beginning",
     "Founded by Sarah and Michael Thompson with a dream to bring artisanal baking to Vasse Village."),
    ("2019", "Community Favorite",
     "Became the go-to spot for locals, winning 'Best Bakery' in the Margaret River Region."),
    ("2021", "Expansion",
     "Added our signature sushi bar and expanded seating to accommodate our growing family of customers."),
    ("2024", "Today",
     "Continuing to serve the community with the same passion and commitment to quality that started it all."),
]

FAQ_FALLBACK = [
    {
        "question": "Do you offer gluten-free options?",
        "answer": (
            "Yes, we offer a selection of gluten-free products including bread, pastries, and cakes. "
            "Please ask our staff for today's gluten-free options."
        ),
    },
    {
        "question": "Can I place a special order for a cake?",
        "answer": (
            "We create custom cakes for all occasions. Please contact us at least 48 hours in advance "
            "for special orders, and we'll be happy to discuss your requirements."
        ),
    },
    {
        "question": "Do you deliver your products?",
        "answer": (
            "We offer delivery for large orders and catering within the Vasse and Busselton area. "
            "Please contact us for delivery options and minimum order requirements."
        ),
    },
    {
        "question": "What time do fresh products come out of the oven?",
        "answer": (
            "Our bakers start early! Fresh bread is typically available from 6:00 AM, with pastries and "
            "other baked goods coming out throughout the morning. For the freshest selection, we "
            "recommend visiting before 10:00 AM."
        ),
    },
]
