import uuid
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal


SectionKey = Literal["summary", "experience", "education", "skills", "projects", "certifications"]
BlockKind = Literal["paragraph", "list"]

DEFAULT_MODULE_ORDER = ["summary", "experience", "education", "projects", "skills", "certifications"]


def _new_id() -> str:
    return str(uuid.uuid4())


class GlyphFragment(BaseModel):
    """One positioned run of text as emitted by the document decoding layer."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float = Field(..., description="Baseline in bottom-up page units (higher = closer to page top)")
    font_size: float = 0.0
    text: str


class RawSection(BaseModel):
    key: SectionKey
    lines: List[str] = Field(default_factory=list)


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""


class MarkupBlock(BaseModel):
    """A paragraph or bulleted list produced from free-text résumé lines."""
    kind: BlockKind
    text: str = ""
    label: str = ""  # Bold lead-in, e.g. "Tech Stack:"
    items: List[str] = Field(default_factory=list)


class RecordModel(BaseModel):
    """Base for everything handed to the editor: camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Profile(RecordModel):
    full_name: str = ""
    position: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    summary: str = ""  # HTML


class ExperienceEntry(RecordModel):
    id: str = Field(default_factory=_new_id)
    company: str = ""
    role: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""  # HTML


class EducationEntry(RecordModel):
    id: str = Field(default_factory=_new_id)
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""  # HTML


class SkillCategory(RecordModel):
    id: str = Field(default_factory=_new_id)
    category: str = ""
    description: str = ""  # HTML list of items


class ProjectEntry(RecordModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    role: str = ""
    description: str = ""  # HTML
    technologies: List[str] = Field(default_factory=list)
    link: str = ""
    start_date: str = ""
    end_date: str = ""


class CertificationEntry(RecordModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    year: str = ""


class Settings(RecordModel):
    primary_color: str = "#2563eb"
    font_family: str = "font-sans"
    margin: str = "p-10"
    language: Literal["vi", "en"] = "vi"
    module_order: List[str] = Field(default_factory=lambda: list(DEFAULT_MODULE_ORDER))


class StructuredRecord(RecordModel):
    profile: Profile = Field(default_factory=Profile)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillCategory] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    settings: Settings = Field(default_factory=Settings)
