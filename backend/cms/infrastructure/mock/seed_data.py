"""Default records written to an empty mock store.

The accounts share one plaintext password; they are development fixtures.
Article order is storage order, newest-first by product convention.
"""

import copy
from datetime import datetime, timezone
from typing import Any

SEED_PASSWORD = "password123"

_SEED_USERS: list[tuple[int, str, str]] = [
    (1, "admin", "admin"),
    (2, "user1", "user"),
    (3, "user2", "user"),
]

_SEED_CATEGORIES: list[dict[str, Any]] = [
    {"id": 1, "name": "Technology", "description": "Articles about technology and innovation"},
    {"id": 2, "name": "Design", "description": "Articles about design and UI/UX"},
    {"id": 3, "name": "Development", "description": "Articles about application development"},
    {"id": 4, "name": "AI", "description": "Articles about artificial intelligence"},
    {"id": 5, "name": "Web3", "description": "Articles about blockchain technology and Web3"},
]
_CATEGORY_TIMESTAMP = "2024-01-01T00:00:00Z"

_SEED_ARTICLES: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Cybersecurity Essentials Every Developer Should Know",
        "description": "Learn the fundamental security practices that every developer should implement to protect their applications and users.",
        "date": "April 13, 2025",
        "author": "Admin",
        "category": "Technology",
        "tags": ["Technology", "Security"],
        "content": {
            "introduction": "In today's digital landscape, cybersecurity is not just a concern for IT departments. It is a fundamental responsibility for every developer who builds applications that handle sensitive data.",
            "sections": [
                {
                    "title": "Authentication & Authorization",
                    "content": "Implement multi-factor authentication wherever possible, use strong password policies, and never store passwords in plain text.\n\n• Use bcrypt or similar for password hashing\n• Implement JWT tokens with proper expiration\n• Use OAuth 2.0 for third-party authentication\n• Implement role-based access control (RBAC)",
                },
                {
                    "title": "Data Protection",
                    "content": "Protect data both at rest and in transit.\n\n• Encrypt sensitive data using AES-256\n• Use HTTPS for all communications\n• Validate and sanitize input\n• Use parameterized queries to prevent SQL injection",
                },
                {
                    "title": "Secure Development Practices",
                    "content": "Build security into the development process from the beginning.\n\n• Follow the principle of least privilege\n• Keep dependencies updated and scan for vulnerabilities\n• Handle errors without exposing sensitive information\n• Use security headers and CORS policies",
                },
            ],
            "conclusion": "Security is an ongoing process, not a one-time implementation. Stay current and keep improving your application's security posture.",
        },
    },
    {
        "id": 2,
        "title": "The Future of Work: Remote-First Teams and Digital Tools",
        "description": "Explore how remote work is reshaping the tech industry and the tools that are making it possible.",
        "date": "April 12, 2025",
        "author": "Admin",
        "category": "Technology",
        "tags": ["Technology", "Work"],
        "content": {
            "introduction": "The global shift to remote work has changed how we think about productivity, collaboration, and work-life balance. Remote-first approaches are becoming the standard for tech companies worldwide.",
            "sections": [
                {
                    "title": "The Remote-First Advantage",
                    "content": "• Access to a global talent pool\n• Reduced overhead costs\n• Improved work-life balance\n• Increased productivity and focus",
                },
                {
                    "title": "Essential Digital Tools",
                    "content": "• Communication: Slack, Microsoft Teams, Discord\n• Project Management: Asana, Trello, Jira\n• Video Conferencing: Zoom, Google Meet, Whereby\n• Document Collaboration: Google Workspace, Notion, Confluence",
                },
            ],
            "conclusion": "Companies that adapt to remote-first work will have an advantage in attracting and retaining talent.",
        },
    },
    {
        "id": 7,
        "title": "Figma's New Dev Mode: A Game-Changer for Designers & Developers",
        "description": "Explore how Figma's latest features are bridging the gap between design and development.",
        "date": "February 4, 2025",
        "author": "Admin",
        "category": "Design",
        "tags": ["Design", "Tools"],
        "content": {
            "introduction": "Collaboration between designers and developers has always been critical to project success. Figma's Dev Mode makes the handoff smoother and more efficient than ever before.",
            "sections": [
                {
                    "title": "What is Dev Mode?",
                    "content": "Dev Mode is a workspace within Figma designed for developers. It exposes ready-to-implement specs: spacing, colors, font styles, and asset exports.",
                },
                {
                    "title": "Bridging the Gap Between Design & Development",
                    "content": "• Live Design Specs\n• Code Snippets for CSS, iOS Swift, and Android XML\n• Version History Access\n• Integrated Comments",
                },
                {
                    "title": "Why It Matters",
                    "content": "Exact specifications reduce errors, shorten build times, and improve the quality of the final product.",
                },
            ],
            "conclusion": "What do you think of Dev Mode? Have you tried it yet? Share your experience in the comments!",
        },
    },
    {
        "id": 3,
        "title": "Design Systems: Why Your Team Needs One in 2025",
        "description": "Discover the benefits of implementing a design system and how it can improve your team's productivity.",
        "date": "April 11, 2025",
        "author": "Admin",
        "category": "Design",
        "tags": ["Design", "Technology"],
        "content": {
            "introduction": "Design systems have evolved from nice-to-have to essential tools for modern product teams. In 2025 they are about efficiency, scalability, and collaboration.",
            "sections": [
                {
                    "title": "What Makes a Great Design System",
                    "content": "• Component libraries with clear documentation\n• Design tokens for spacing and colors\n• Usage and accessibility guidelines\n• Regular maintenance",
                },
                {
                    "title": "Benefits for Your Team",
                    "content": "• Faster development cycles\n• Consistent user experience\n• Reduced design debt\n• Better designer/developer collaboration",
                },
            ],
            "conclusion": "Start small with your most commonly used components and expand from there.",
        },
    },
    {
        "id": 4,
        "title": "Web3 and the Decentralized Internet: What You Need to Know",
        "description": "A comprehensive guide to understanding Web3, blockchain technology, and the decentralized web.",
        "date": "April 10, 2025",
        "author": "Admin",
        "category": "Technology",
        "tags": ["Technology", "Web3"],
    },
    {
        "id": 5,
        "title": "Debugging Like a Pro: Tools & Techniques for Faster Fixes",
        "description": "Master the art of debugging with these proven techniques and tools used by professional developers.",
        "date": "April 9, 2025",
        "author": "Admin",
        "category": "Technology",
        "tags": ["Technology", "Development"],
    },
    {
        "id": 6,
        "title": "Accessibility in Design: More Than Just Compliance",
        "description": "Learn why accessibility should be a core part of your design process, not just a checkbox.",
        "date": "April 8, 2025",
        "author": "Admin",
        "category": "Design",
        "tags": ["Design", "Accessibility"],
    },
    {
        "id": 8,
        "title": "How AI Is Changing the Game in Front-End Development",
        "description": "Discover how artificial intelligence is revolutionizing the way we build user interfaces.",
        "date": "April 6, 2025",
        "author": "Admin",
        "category": "Technology",
        "tags": ["Technology", "AI"],
    },
    {
        "id": 9,
        "title": "10 UI Trends Dominating 2025",
        "description": "Stay ahead of the curve with these emerging UI design trends that are shaping the digital landscape.",
        "date": "April 5, 2025",
        "author": "Admin",
        "category": "Design",
        "tags": ["Design", "UI"],
        "content": {
            "introduction": "The UI design landscape keeps evolving, and 2025 brings new trends that reshape how we interact with digital products.",
            "sections": [
                {
                    "title": "Bold Typography & Micro-Interactions",
                    "content": "• Oversized headings with custom fonts\n• Animated text reveals\n• Contextual typography\n• Better contrast ratios",
                },
                {
                    "title": "Immersive 3D Elements",
                    "content": "• Subtle 3D buttons and cards\n• Parallax scrolling\n• Glassmorphism and neumorphism\n• Interactive 3D product showcases",
                },
                {
                    "title": "Dark Mode & Accessibility",
                    "content": "• High contrast ratios\n• Reduced motion options\n• Screen reader optimization\n• Color-blind friendly palettes",
                },
            ],
            "conclusion": "These trends are about creating more inclusive, engaging, and functional experiences. Which one are you most excited to implement?",
        },
    },
]


def seed_users() -> list[dict[str, Any]]:
    now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return [
        {
            "id": user_id,
            "username": username,
            "password": SEED_PASSWORD,
            "role": role,
            "email": f"{username}@example.com",
            "created_at": now,
            "updated_at": now,
        }
        for user_id, username, role in _SEED_USERS
    ]


def seed_articles() -> list[dict[str, Any]]:
    return copy.deepcopy(_SEED_ARTICLES)


def seed_categories() -> list[dict[str, Any]]:
    return [
        {**category, "created_at": _CATEGORY_TIMESTAMP, "updated_at": _CATEGORY_TIMESTAMP}
        for category in _SEED_CATEGORIES
    ]
