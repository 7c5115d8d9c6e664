# careerbridge/constants.py
from careerbridge.schemas.profile import CareerTrack, ExperienceLevel

# sub-score weights (skill overlap dominates)
W_SKILL = 0.6
W_EXPERIENCE = 0.2
W_TRACK = 0.2

NEUTRAL_SCORE = 50.0

# (candidate level, job level) -> alignment; equal levels score 100
EXPERIENCE_ALIGNMENT = {
    (ExperienceLevel.FRESHER, ExperienceLevel.JUNIOR): 80.0,
    (ExperienceLevel.JUNIOR, ExperienceLevel.MID): 80.0,
    (ExperienceLevel.FRESHER, ExperienceLevel.MID): 60.0,
    (ExperienceLevel.JUNIOR, ExperienceLevel.FRESHER): 70.0,
    (ExperienceLevel.MID, ExperienceLevel.JUNIOR): 70.0,
    (ExperienceLevel.MID, ExperienceLevel.FRESHER): 40.0,
}

# job-title keywords per career track (substring match on the lowercased title)
TRACK_KEYWORDS = {
    CareerTrack.WEB_DEVELOPMENT: ("frontend", "backend", "full stack", "web", "react", "node"),
    CareerTrack.DATA: ("data", "analyst", "scientist", "ml", "machine learning"),
    CareerTrack.DESIGN: ("designer", "ui", "ux", "graphic"),
    CareerTrack.MARKETING: ("marketing", "seo", "content", "social"),
}

# verdict thresholds, checked top-down
VERDICTS = (
    (80.0, "Excellent match!"),
    (60.0, "Good match"),
    (40.0, "Moderate match"),
)
FALLBACK_VERDICT = "Limited match"

# explanation list sizes
MAX_MATCHED_SKILLS_SHOWN = 5
MAX_MISSING_SKILLS_SHOWN = 3

# known roles we try to spot inside free-text questions
ROLE_KEYWORDS = (
    "data analyst", "data scientist", "backend developer", "frontend developer",
    "full stack developer", "software engineer", "web developer", "devops engineer",
    "machine learning engineer", "ui/ux designer", "product manager", "react developer",
    "java developer", "python developer", "node developer", "angular developer",
)
DEFAULT_ROLE = "Software Developer"
