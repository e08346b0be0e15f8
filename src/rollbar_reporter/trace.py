from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .frame import Frame


class ExceptionInfo(BaseModel):
  """
  Exception metadata carried by a trace body.
  """

  model_config = ConfigDict(populate_by_name=True)

  class_: str = Field("Generic", alias="class")
  message: str
  # Mirrors ``message`` unless a richer rendering is attached.
  description: Optional[str] = None

  @model_validator(mode="after")
  def _default_description(self) -> "ExceptionInfo":
    if self.description is None:
      self.description = self.message
    return self


class Trace(BaseModel):
  """
  Ordered frames plus the exception they describe.
  """

  frames: List[Frame] = Field(default_factory=list)
  exception: ExceptionInfo

  def to_body(self) -> dict[str, Any]:
    return {
      "frames": [frame.to_dict() for frame in self.frames],
      "exception": self.exception.model_dump(by_alias=True),
    }
