from pydantic import BaseModel, Field

from .serializer import OutputFormat
from .tree import ConflictPolicy


class ConverterOptions(BaseModel):
    indent: int = Field(2, ge=0)
    format: OutputFormat = "json"
    on_conflict: ConflictPolicy = "error"
