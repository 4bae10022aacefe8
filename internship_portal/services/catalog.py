"""
Default internship catalog.

Seeded into an empty `internships` collection at startup (SEED_CATALOG)
or by scripts/seed_internships.py.
"""

from internship_portal.schemas.schemas import Internship

DEFAULT_INTERNSHIPS = [
    Internship(
        id="1",
        title="Software Development Intern",
        company="TechCorp India",
        location="Bangalore",
        duration="3 Months",
        stipend="₹15,000/month",
        description="Work on cutting-edge web applications using React and Node.js",
        required_skills=["programming", "web-development", "database"],
        sector="technology",
        work_mode="hybrid",
        education_level="bachelor",
    ),
    Internship(
        id="2",
        title="Data Science Intern",
        company="DataAnalytics Pvt Ltd",
        location="Mumbai",
        duration="6 Months",
        stipend="₹20,000/month",
        description="Analyze large datasets and build machine learning models",
        required_skills=["data-analysis", "machine-learning", "programming"],
        sector="technology",
        work_mode="remote",
        education_level="bachelor",
    ),
    Internship(
        id="3",
        title="Marketing Intern",
        company="Digital Marketing Solutions",
        location="Delhi",
        duration="2 Months",
        stipend="₹10,000/month",
        description="Create digital marketing campaigns and social media content",
        required_skills=["communication", "creativity", "analytical-thinking"],
        sector="media",
        work_mode="onsite",
        education_level="bachelor",
    ),
    Internship(
        id="4",
        title="Finance Intern",
        company="Investment Bank Ltd",
        location="Mumbai",
        duration="3 Months",
        stipend="₹25,000/month",
        description="Assist in financial analysis and investment research",
        required_skills=["analytical-thinking", "problem-solving", "communication"],
        sector="finance",
        work_mode="onsite",
        education_level="bachelor",
    ),
    Internship(
        id="5",
        title="Cybersecurity Intern",
        company="SecureTech Solutions",
        location="Hyderabad",
        duration="4 Months",
        stipend="₹18,000/month",
        description="Learn about network security and threat analysis",
        required_skills=["cybersecurity", "networking", "problem-solving"],
        sector="technology",
        work_mode="hybrid",
        education_level="bachelor",
    ),
]
