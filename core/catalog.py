"""Fixed catalog data: category lookups and the bundled demo videos"""
from typing import Any, Dict, List

# Category label -> YouTube search query
CATEGORY_QUERIES: Dict[str, str] = {
    "React": "React.js tutorial programming",
    "AI & ML": "Artificial Intelligence Machine Learning",
    "JavaScript": "JavaScript programming tutorial",
    "Tech Careers": "software engineering career tech jobs",
    "Web Dev": "web development tutorial frontend backend",
    "Open Source": "open source software development",
}

CATEGORIES: List[str] = list(CATEGORY_QUERIES)

DEFAULT_QUERY = "trending tech programming"
DEFAULT_LIVE_LIMIT = 10
LIVE_LOOKBACK_DAYS = 30
SUMMARY_LIMIT = 50
# search.list rejects maxResults above this
YOUTUBE_MAX_RESULTS = 50

# Static demo dataset, served whenever the live source is unusable or failing.
# Never mutated at runtime.
STATIC_VIDEOS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "rank": 1,
        "thumbnail": "https://picsum.photos/seed/video1/400/225",
        "title": "Why Replacing Developers with AI is a Bad Idea",
        "channel": "MACKARD",
        "views": "2.0M views",
        "time_ago": "1 week ago",
        "rating": "Excellent",
        "category": "AI & ML",
        "description": "An in-depth analysis of why AI cannot fully replace human developers "
                       "and the importance of human creativity in software development.",
    },
    {
        "id": "2",
        "rank": 2,
        "thumbnail": "https://picsum.photos/seed/video2/400/225",
        "title": "The wild rise of OpenClaw",
        "channel": "FIRESHIP",
        "views": "1.3M views",
        "time_ago": "1 week ago",
        "rating": "Excellent",
        "category": "Open Source",
        "description": "Exploring the rapid growth and adoption of OpenClaw, a new open-source AI framework.",
    },
    {
        "id": "3",
        "rank": 3,
        "thumbnail": "https://picsum.photos/seed/video3/400/225",
        "title": "A brief history of programming languages",
        "channel": "FIRESHIP",
        "views": "591K views",
        "time_ago": "3 weeks ago",
        "rating": "Excellent",
        "category": "Tech Careers",
        "description": "A comprehensive overview of how programming languages evolved from assembly "
                       "to modern high-level languages.",
    },
    {
        "id": "4",
        "rank": 4,
        "thumbnail": "https://picsum.photos/seed/video4/400/225",
        "title": "Claude Code's New Agent Teams Are Revolutionary",
        "channel": "BART SLODYCZKA",
        "views": "140K views",
        "time_ago": "5 days ago",
        "rating": "Excellent",
        "category": "AI & ML",
        "description": "Discover how Claude AI's new agent teams feature is changing the landscape "
                       "of AI-assisted development.",
    },
    {
        "id": "5",
        "rank": 5,
        "thumbnail": "https://picsum.photos/seed/video5/400/225",
        "title": "I Read Honey's Source Code and Here's What I Found",
        "channel": "THE PRIMETIME",
        "views": "879K views",
        "time_ago": "3 weeks ago",
        "rating": "Excellent",
        "category": "Web Dev",
        "description": "A detailed code review of the Honey browser extension revealing interesting "
                       "implementation details.",
    },
    {
        "id": "6",
        "rank": 6,
        "thumbnail": "https://picsum.photos/seed/video6/400/225",
        "title": "Cursor Is Lying To Developers About This Feature",
        "channel": "BASIC DEV",
        "views": "291K views",
        "time_ago": "2 weeks ago",
        "rating": "Excellent",
        "category": "Tech Careers",
        "description": "Investigating controversial claims about Cursor AI and what developers need to know.",
    },
    {
        "id": "7",
        "rank": 7,
        "thumbnail": "https://picsum.photos/seed/video7/400/225",
        "title": "Learning to code has changed forever",
        "channel": "TECH WITH TIM",
        "views": "136K views",
        "time_ago": "1 week ago",
        "rating": "Excellent",
        "category": "Tech Careers",
        "description": "How AI tools and new learning platforms are revolutionizing the way people "
                       "learn programming.",
    },
    {
        "id": "8",
        "rank": 8,
        "thumbnail": "https://picsum.photos/seed/video8/400/225",
        "title": "The Best Place to Learn AI in 2026?",
        "channel": "JASON WEST",
        "views": "181K views",
        "time_ago": "1 week ago",
        "rating": "Good",
        "category": "AI & ML",
        "description": "Comparing top AI learning platforms and resources for aspiring AI engineers in 2026.",
    },
    {
        "id": "9",
        "rank": 9,
        "thumbnail": "https://picsum.photos/seed/video9/400/225",
        "title": "React 19 - Everything You Need to Know",
        "channel": "FIRESHIP",
        "views": "2.5M views",
        "time_ago": "2 weeks ago",
        "rating": "Excellent",
        "category": "React",
        "description": "A comprehensive guide to all the new features and improvements in React 19.",
    },
    {
        "id": "10",
        "rank": 10,
        "thumbnail": "https://picsum.photos/seed/video10/400/225",
        "title": "JavaScript Performance Tips That Actually Work",
        "channel": "WEB DEV SIMPLIFIED",
        "views": "450K views",
        "time_ago": "1 week ago",
        "rating": "Excellent",
        "category": "JavaScript",
        "description": "Proven techniques to optimize JavaScript performance in modern web applications.",
    },
]
