from typing import List, Literal

from pydantic import BaseModel


class GeneratedDocument(BaseModel):
    id: str  # "main" or the auxiliary page id
    kind: Literal["main", "page"]
    path: str  # where the file is published, e.g. "public/<slug>/index.html"
    filename: str
    canonical_url: str
    title_length: int
    description_length: int
    has_static_content: bool
    html: str


class InstructionSection(BaseModel):
    """One block of human-readable publishing steps."""

    title: str
    steps: List[str]
    note: str = ""


class ExportResponse(BaseModel):
    documents: List[GeneratedDocument]
    folder_preview: List[str]
    instructions: List[InstructionSection]
