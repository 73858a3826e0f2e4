from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiRecord(BaseModel):
    """Base for the mock REST API records; field names go over the wire in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Post(ApiRecord):
    id: Optional[int] = None
    user_id: int
    title: str
    body: str


class User(ApiRecord):
    id: Optional[int] = None
    name: str
    username: str
    email: str
    phone: str
    website: str


class Comment(ApiRecord):
    id: Optional[int] = None
    post_id: int
    name: str
    email: str
    body: str


# OpenAI-compatible chat completion payloads

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: Role
    content: str


class CompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    stop: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ResponseMessage(BaseModel):
    role: str
    content: str


class Choice(BaseModel):
    index: int
    message: ResponseMessage
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class CompletionResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    object: str
    created: int
    model: str
    choices: List[Choice]
    usage: Usage

    @property
    def content(self) -> str:
        return self.choices[0].message.content


class ModelInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    object: str


class ModelList(BaseModel):
    object: str
    data: List[ModelInfo]


class TestScenario(BaseModel):
    __test__ = False

    name: str
    request: CompletionRequest
    expected_behavior: str


class ValidationCase(BaseModel):
    name: str
    data: Dict[str, Any]
    expected_status: int
