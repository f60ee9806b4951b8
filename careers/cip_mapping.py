"""
Career title → CIP code mapping.

Maps common career titles to the CIP (Classification of Instructional
Programs) codes of the programs that lead to them, plus search keywords
for finding related courses.

Public API:
    CAREER_TO_CIP_MAPPINGS                  → tuple[CareerMapping, ...]
    get_cip_codes_for_career(career)        → list[str]
    get_enhanced_keywords_for_career(career) → list[str]
    has_career_mapping(career)              → bool
"""

from pydantic import BaseModel, ConfigDict


class CareerMapping(BaseModel):
    model_config = ConfigDict(frozen=True)

    career: str
    cip_codes: tuple[str, ...]
    keywords: tuple[str, ...]


def _m(career: str, cip_codes: list[str], keywords: list[str]) -> CareerMapping:
    return CareerMapping(career=career, cip_codes=tuple(cip_codes), keywords=tuple(keywords))


CAREER_TO_CIP_MAPPINGS: tuple[CareerMapping, ...] = (
    # Technology & computer science
    _m("Web Developer", ["11.0101", "11.0201", "11.0701", "11.0801"],
       ["web", "developer", "software", "programming", "frontend", "backend",
        "fullstack", "javascript", "html", "css"]),
    _m("Software Engineer", ["11.0101", "11.0701"],
       ["software", "engineer", "programming", "developer", "coding", "application", "systems"]),
    _m("Data Scientist", ["11.0101", "11.0701"],
       ["data", "scientist", "analytics", "machine learning", "statistics", "python", "analysis"]),
    _m("Cybersecurity Specialist", ["11.0101", "11.0103", "11.0901"],
       ["security", "cybersecurity", "network", "information security", "encryption", "protection"]),
    _m("Network Administrator", ["11.0101", "11.0901"],
       ["network", "administrator", "systems", "infrastructure", "servers", "IT"]),
    _m("Database Administrator", ["11.0101", "11.0802"],
       ["database", "administrator", "SQL", "data management", "DBA"]),
    _m("Mobile Developer", ["11.0101", "11.0701"],
       ["mobile", "developer", "iOS", "Android", "app development", "smartphone"]),
    _m("IT Support Specialist", ["11.0101", "11.0103"],
       ["IT", "support", "help desk", "technical support", "troubleshooting", "customer service"]),

    # Healthcare
    _m("Registered Nurse", ["51.1601", "51.3801"],
       ["nurse", "nursing", "RN", "healthcare", "patient care", "medical"]),
    _m("Medical Assistant", ["51.0801"],
       ["medical assistant", "clinical", "healthcare", "patient", "medical office"]),
    _m("Dental Hygienist", ["51.0602"],
       ["dental", "hygienist", "oral health", "teeth", "dentistry"]),
    _m("Physical Therapist", ["51.2308"],
       ["physical therapy", "PT", "rehabilitation", "movement", "injury recovery"]),

    # Business
    _m("Accountant", ["52.0301"],
       ["accounting", "accountant", "CPA", "finance", "bookkeeping", "tax"]),
    _m("Marketing Manager", ["52.1401"],
       ["marketing", "manager", "advertising", "branding", "promotion", "social media"]),
    _m("Business Analyst", ["52.0201"],
       ["business", "analyst", "data analysis", "strategy", "operations", "consulting"]),
    _m("Human Resources Manager", ["52.1001"],
       ["human resources", "HR", "personnel", "recruiting", "employee", "benefits"]),

    # Engineering
    _m("Electrical Engineer", ["14.1001"],
       ["electrical", "engineer", "circuits", "electronics", "power", "systems"]),
    _m("Mechanical Engineer", ["14.1901"],
       ["mechanical", "engineer", "machines", "design", "manufacturing", "CAD"]),
    _m("Civil Engineer", ["14.0801"],
       ["civil", "engineer", "construction", "infrastructure", "buildings", "roads"]),

    # Education
    _m("Teacher", ["13.1202", "13.1210", "13.1301"],
       ["teacher", "education", "classroom", "instruction", "students", "curriculum"]),
    _m("School Counselor", ["13.1101"],
       ["counselor", "guidance", "school", "student services", "academic advising"]),

    # Arts & media
    _m("Graphic Designer", ["50.0401", "10.0303"],
       ["graphic", "designer", "visual design", "adobe", "creative", "branding"]),
    _m("Digital Media Artist", ["11.0801", "50.0401"],
       ["digital media", "artist", "animation", "video", "multimedia", "content creation"]),

    # Hospitality & tourism
    _m("Hotel Manager", ["52.0901"],
       ["hotel", "hospitality", "manager", "tourism", "lodging", "guest services"]),
    _m("Chef", ["12.0500"],
       ["chef", "culinary", "cooking", "cuisine", "kitchen", "food service"]),

    # Science
    _m("Biologist", ["26.0101"],
       ["biology", "biologist", "life science", "research", "laboratory", "organisms"]),
    _m("Environmental Scientist", ["03.0103"],
       ["environmental", "scientist", "ecology", "conservation", "sustainability", "nature"]),
)


def _normalise(career: str) -> str:
    return career.lower().strip()


def get_cip_codes_for_career(career: str) -> list[str]:
    """
    Return CIP codes for a career title.

    An exact (case-insensitive) title match returns that entry's codes as
    listed. Otherwise every entry sharing at least one title word with the
    input contributes its codes, deduplicated in first-seen order. A single
    shared word is enough, so "Civil Servant" picks up Civil Engineer.
    """
    career_lower = _normalise(career)
    if not career_lower:
        return []

    for mapping in CAREER_TO_CIP_MAPPINGS:
        if mapping.career.lower() == career_lower:
            return list(mapping.cip_codes)

    codes: dict[str, None] = {}
    for mapping in CAREER_TO_CIP_MAPPINGS:
        words = mapping.career.lower().split()
        if any(word in career_lower for word in words):
            codes.update(dict.fromkeys(mapping.cip_codes))
    return list(codes)


def get_enhanced_keywords_for_career(career: str) -> list[str]:
    """
    Career words followed by the keywords of the first related mapping.

    A blank career is contained in every title, so it gets the first
    entry's keywords.
    """
    career_lower = _normalise(career)
    career_words = career_lower.split()

    for mapping in CAREER_TO_CIP_MAPPINGS:
        title = mapping.career.lower()
        if title == career_lower or title in career_lower or career_lower in title:
            return career_words + list(mapping.keywords)
    return career_words


def has_career_mapping(career: str) -> bool:
    return len(get_cip_codes_for_career(career)) > 0
