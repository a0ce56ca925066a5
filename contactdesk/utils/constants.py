# Words that flag an incoming message as high priority
HIGH_PRIORITY_KEYWORDS = (
    "urgent",
    "emergency",
    "complaint",
    "problem",
    "issue",
    "error",
)

# Contact methods the registry starts with
DEFAULT_CONTACT_METHODS = [
    {
        "id": 1,
        "type": "phone",
        "label": "Phone",
        "value": "+1 (555) 123-4567",
        "description": "Call us during business hours",
        "is_active": True,
        "order": 1,
    },
    {
        "id": 2,
        "type": "whatsapp",
        "label": "WhatsApp",
        "value": "+1 (555) 123-4567",
        "description": "Message us on WhatsApp",
        "is_active": True,
        "order": 2,
    },
    {
        "id": 3,
        "type": "email",
        "label": "Email",
        "value": "info@herbs.com",
        "description": "Send us an email",
        "is_active": True,
        "order": 3,
    },
    {
        "id": 4,
        "type": "address",
        "label": "Address",
        "value": "123 Herbs Street, Natural City, NC 12345",
        "description": "Visit our store",
        "is_active": True,
        "order": 4,
    },
    {
        "id": 5,
        "type": "website",
        "label": "Website",
        "value": "https://herbs.com",
        "description": "Visit our website",
        "is_active": True,
        "order": 5,
    },
    {
        "id": 6,
        "type": "social",
        "label": "Facebook",
        "value": "https://facebook.com/herbs",
        "description": "Follow us on Facebook",
        "is_active": True,
        "order": 6,
    },
]

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
