"""Resume document model and the single normalization step.

Every analyzer receives a :class:`ResumeDocument` produced by
:func:`coerce_document`.  Raw input arrives as a camelCase mapping (the shape
the editor and the HTTP API exchange); absent keys and ``None`` values are
substituted with empty strings / empty tuples here so that downstream logic
never has to guard against them.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidDocumentError

SECTION_KEYS: Tuple[str, ...] = ("basics", "summary", "experience", "education", "skills", "projects", "metadata")
ARRAY_SECTIONS: Tuple[str, ...] = ("experience", "education", "skills", "projects")


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def generate_id(prefix: str) -> str:
    """Create a unique id for a new array item, e.g. ``exp-1735430400000-3f9a1c2b0``."""
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Basics:
    full_name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""


@dataclass(frozen=True)
class ExperienceEntry:
    id: str = ""
    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""  # empty means "present"
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationEntry:
    id: str = ""
    institution: str = ""
    degree: str = ""
    start_year: str = ""
    end_year: str = ""
    gpa: str = ""
    highlights: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectEntry:
    id: str = ""
    name: str = ""
    description: str = ""
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Metadata:
    last_updated: str = ""
    template_id: str = ""


@dataclass(frozen=True)
class ResumeDocument:
    """Immutable resume document.  Analyzers read it, nothing mutates it."""

    basics: Basics = field(default_factory=Basics)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeDocument":
        return coerce_document(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the camelCase mapping shape."""
        b = self.basics
        return {
            "basics": {
                "fullName": b.full_name,
                "headline": b.headline,
                "email": b.email,
                "phone": b.phone,
                "location": b.location,
                "linkedin": b.linkedin,
                "github": b.github,
            },
            "summary": self.summary,
            "experience": [
                {
                    "id": e.id,
                    "company": e.company,
                    "role": e.role,
                    "startDate": e.start_date,
                    "endDate": e.end_date,
                    "bullets": list(e.bullets),
                }
                for e in self.experience
            ],
            "education": [
                {
                    "id": e.id,
                    "institution": e.institution,
                    "degree": e.degree,
                    "startYear": e.start_year,
                    "endYear": e.end_year,
                    "gpa": e.gpa,
                    "highlights": list(e.highlights),
                }
                for e in self.education
            ],
            "skills": list(self.skills),
            "projects": [
                {
                    "id": p.id,
                    "name": p.name,
                    "description": p.description,
                    "bullets": list(p.bullets),
                }
                for p in self.projects
            ],
            "metadata": {
                "lastUpdated": self.metadata.last_updated,
                "templateId": self.metadata.template_id,
            },
        }


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def coerce_document(document: Any) -> ResumeDocument:
    """Return *document* as a fully-populated :class:`ResumeDocument`.

    Accepts an existing :class:`ResumeDocument` (returned unchanged) or a
    camelCase mapping.  Raises :class:`InvalidDocumentError` only for contract
    violations: ``None``, a non-mapping, or a section of the wrong type.
    """
    if isinstance(document, ResumeDocument):
        return document
    if document is None:
        raise InvalidDocumentError("Resume document is required")
    if not isinstance(document, Mapping):
        raise InvalidDocumentError(f"Resume document must be a mapping, got {type(document).__name__}")

    basics = _mapping(document.get("basics"), "basics")
    metadata = _mapping(document.get("metadata"), "metadata")

    return ResumeDocument(
        basics=Basics(
            full_name=_text(basics.get("fullName")),
            headline=_text(basics.get("headline")),
            email=_text(basics.get("email")),
            phone=_text(basics.get("phone")),
            location=_text(basics.get("location")),
            linkedin=_text(basics.get("linkedin")),
            github=_text(basics.get("github")),
        ),
        summary=_text(document.get("summary")),
        experience=tuple(
            _experience(item) for item in _sequence(document.get("experience"), "experience")
        ),
        education=tuple(
            _education(item) for item in _sequence(document.get("education"), "education")
        ),
        skills=_strings(document.get("skills"), "skills"),
        projects=tuple(_project(item) for item in _sequence(document.get("projects"), "projects")),
        metadata=Metadata(
            last_updated=_text(metadata.get("lastUpdated")),
            template_id=_text(metadata.get("templateId")),
        ),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _mapping(value: Any, section: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidDocumentError(f"'{section}' must be an object, got {type(value).__name__}")
    return value


def _sequence(value: Any, section: str) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (list, tuple)):
        raise InvalidDocumentError(f"'{section}' must be a list, got {type(value).__name__}")
    return tuple(value)


def _strings(value: Any, section: str) -> Tuple[str, ...]:
    return tuple(_text(item) for item in _sequence(value, section))


def _experience(item: Any) -> ExperienceEntry:
    if isinstance(item, ExperienceEntry):
        return item
    data = _mapping(item, "experience[]")
    return ExperienceEntry(
        id=_text(data.get("id")),
        company=_text(data.get("company")),
        role=_text(data.get("role")),
        start_date=_text(data.get("startDate")),
        end_date=_text(data.get("endDate")),
        bullets=_strings(data.get("bullets"), "experience[].bullets"),
    )


def _education(item: Any) -> EducationEntry:
    if isinstance(item, EducationEntry):
        return item
    data = _mapping(item, "education[]")
    return EducationEntry(
        id=_text(data.get("id")),
        institution=_text(data.get("institution")),
        degree=_text(data.get("degree")),
        start_year=_text(data.get("startYear")),
        end_year=_text(data.get("endYear")),
        gpa=_text(data.get("gpa")),
        highlights=_strings(data.get("highlights"), "education[].highlights"),
    )


def _project(item: Any) -> ProjectEntry:
    if isinstance(item, ProjectEntry):
        return item
    data = _mapping(item, "projects[]")
    return ProjectEntry(
        id=_text(data.get("id")),
        name=_text(data.get("name")),
        description=_text(data.get("description")),
        bullets=_strings(data.get("bullets"), "projects[].bullets"),
    )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def empty_resume() -> Dict[str, Any]:
    """Structurally valid document with every section empty."""
    return ResumeDocument().to_dict()


def create_empty_experience() -> Dict[str, Any]:
    return {"id": generate_id("exp"), "company": "", "role": "", "startDate": "", "endDate": "", "bullets": [""]}


def create_empty_education() -> Dict[str, Any]:
    return {
        "id": generate_id("edu"),
        "institution": "",
        "degree": "",
        "startYear": "",
        "endYear": "",
        "gpa": "",
        "highlights": [],
    }


def create_empty_project() -> Dict[str, Any]:
    return {"id": generate_id("proj"), "name": "", "description": "", "bullets": [""]}


def sample_resume(last_updated: Optional[str] = None) -> Dict[str, Any]:
    """The document a fresh editing session starts from."""
    return {
        "basics": {
            "fullName": "Sarah Johnson",
            "headline": "Senior Software Engineer",
            "email": "sarah.johnson@email.com",
            "phone": "+1 (555) 123-4567",
            "location": "San Francisco, CA",
            "linkedin": "linkedin.com/in/sarahjohnson",
            "github": "github.com/sarahjohnson",
        },
        "summary": (
            "Results-driven Senior Software Engineer with 8+ years of experience building scalable web "
            "applications and leading cross-functional teams. Passionate about clean code, system "
            "architecture, and mentoring junior developers. Proven track record of delivering high-impact "
            "projects that improve user engagement by 40%+."
        ),
        "experience": [
            {
                "id": "exp-1",
                "company": "TechCorp Inc.",
                "role": "Senior Software Engineer",
                "startDate": "2021-01",
                "endDate": "",
                "bullets": [
                    "Led development of microservices architecture serving 10M+ users",
                    "Mentored team of 5 junior engineers, improving code quality by 35%",
                    "Reduced API response time by 60% through optimization",
                ],
            },
            {
                "id": "exp-2",
                "company": "StartupXYZ",
                "role": "Software Engineer",
                "startDate": "2018-06",
                "endDate": "2021-01",
                "bullets": [
                    "Built React-based dashboard used by 50K+ customers",
                    "Implemented CI/CD pipeline reducing deployment time by 80%",
                    "Collaborated with design team to improve UX, increasing user retention by 25%",
                ],
            },
        ],
        "education": [
            {
                "id": "edu-1",
                "institution": "Stanford University",
                "degree": "B.S. Computer Science",
                "startYear": "2014",
                "endYear": "2018",
                "gpa": "3.8/4.0",
                "highlights": ["Magna Cum Laude", "Dean's List"],
            },
        ],
        "skills": [
            "JavaScript",
            "TypeScript",
            "React",
            "Node.js",
            "Python",
            "AWS",
            "Docker",
            "PostgreSQL",
            "GraphQL",
            "Git",
        ],
        "projects": [
            {
                "id": "proj-1",
                "name": "E-Commerce Platform",
                "description": "Full-stack e-commerce solution with real-time inventory management",
                "bullets": [
                    "Built with React, Node.js, and PostgreSQL",
                    "Handles 10K+ concurrent users with 99.9% uptime",
                    "Integrated Stripe payment processing",
                ],
            },
            {
                "id": "proj-2",
                "name": "AI Code Review Bot",
                "description": "GitHub bot that provides automated code review suggestions using GPT-4",
                "bullets": [
                    "Reduced code review time by 40%",
                    "Deployed on AWS Lambda for serverless scaling",
                ],
            },
        ],
        "metadata": {
            "lastUpdated": last_updated or utc_now_iso(),
            "templateId": "professional-classic",
        },
    }
