from typing import Any, List

from pydantic import BaseModel, field_validator, model_validator


class EvaluationRequest(BaseModel):
    respostas: List[Any] = []

    @model_validator(mode="before")
    @classmethod
    def body_as_object(cls, data: Any) -> Any:
        # arrays, scalars and non-JSON bodies carry no respostas
        if isinstance(data, dict):
            return data
        return {}

    @field_validator("respostas", mode="before")
    @classmethod
    def respostas_as_list(cls, v: Any) -> List[Any]:
        # absent, null or non-array payloads score as an empty list
        if isinstance(v, (list, tuple)):
            return list(v)
        return []
