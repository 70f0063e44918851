# skillmatch/constants.py

# substrings that decide a skill's category (first hit wins, default "code")
CATEGORY_KEYWORDS = {
    "web": ("react", "vue", "angular"),
    "database": ("sql", "database", "mongo"),
}
DEFAULT_CATEGORY = "code"

# employment type aliases -> normalized value
EMPLOYMENT_TYPES = {
    "full time": "full-time",
    "full-time": "full-time",
    "fulltime": "full-time",
    "part time": "part-time",
    "part-time": "part-time",
    "contract": "contract",
    "contractor": "contract",
    "intern": "internship",
    "internship": "internship",
    "temporary": "temporary",
    "temp": "temporary",
}

# demo catalog (seeded when the jobs table is empty)
DEMO_LOCATIONS = [
    "San Francisco, CA", "New York, NY", "Austin, TX",
    "Seattle, WA", "Remote", "Boston, MA",
]

DEMO_JOBS = [
    {
        "title": "Frontend Developer",
        "company": "TechCorp",
        "skills": ["React", "JavaScript", "CSS", "HTML"],
        "salary": "$70,000 - $90,000",
        "type": "Full-time",
    },
    {
        "title": "Full Stack Developer",
        "company": "StartupXYZ",
        "skills": ["React", "Node.js", "SQL", "JavaScript"],
        "salary": "$80,000 - $110,000",
        "type": "Full-time",
    },
    {
        "title": "Java Developer",
        "company": "Enterprise Solutions",
        "skills": ["Java", "SQL", "Spring", "Maven"],
        "salary": "$85,000 - $120,000",
        "type": "Full-time",
    },
    {
        "title": "Database Administrator",
        "company": "DataFlow Inc",
        "skills": ["SQL", "PostgreSQL", "MySQL", "Python"],
        "salary": "$75,000 - $100,000",
        "type": "Full-time",
    },
    {
        "title": "React Developer",
        "company": "Modern Web Co",
        "skills": ["React", "TypeScript", "Redux", "GraphQL"],
        "salary": "$65,000 - $85,000",
        "type": "Contract",
    },
    {
        "title": "Software Engineer",
        "company": "Tech Innovators",
        "skills": ["Java", "Python", "SQL", "Docker"],
        "salary": "$90,000 - $130,000",
        "type": "Full-time",
    },
]

# skills given to the demo user by `python -m skillmatch.seed`
DEMO_SKILLS = ["Java", "SQL", "React"]
