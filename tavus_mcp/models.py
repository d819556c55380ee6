from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ToolArguments(BaseModel):
    # Unknown fields are kept so create-style tools forward whatever the
    # Tavus API accepts, not just what the catalogue lists.
    model_config = ConfigDict(extra="allow", protected_namespaces=(), populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent"""
        return self.model_dump(mode="json", exclude_unset=True, by_alias=True)


class EmptyArguments(ToolArguments):
    pass


class PhoenixModel(str, Enum):
    PHOENIX_2 = "phoenix-2"
    PHOENIX_3 = "phoenix-3"


class BackgroundScrollType(str, Enum):
    HUMAN = "human"
    SMOOTH = "smooth"


class BackgroundScrollDepth(str, Enum):
    MIDDLE = "middle"
    BOTTOM = "bottom"


class BackgroundScrollReturn(str, Enum):
    RETURN = "return"
    HALT = "halt"


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    COPY = "copy"
    MOVE = "move"
    TEST = "test"


# Replicas

class ReplicaProperties(ToolArguments):
    gaze_correction: Optional[bool] = None
    background_green_screen: Optional[bool] = None


class CreateReplicaArguments(ToolArguments):
    train_video_url: str
    replica_name: Optional[str] = None
    consent_video_url: Optional[str] = None
    callback_url: Optional[str] = None
    model_name: Optional[PhoenixModel] = None
    properties: Optional[ReplicaProperties] = None


class ReplicaIdArguments(ToolArguments):
    replica_id: str = Field(..., min_length=1)


class GetReplicaArguments(ReplicaIdArguments):
    verbose: Optional[bool] = None


class RenameReplicaArguments(ReplicaIdArguments):
    replica_name: str


# Videos

class VideoProperties(ToolArguments):
    background_scroll: Optional[bool] = None
    background_scroll_type: Optional[BackgroundScrollType] = None
    background_scroll_depth: Optional[BackgroundScrollDepth] = None
    background_scroll_return: Optional[BackgroundScrollReturn] = None
    start_with_wave: Optional[bool] = None


class GenerateVideoArguments(ToolArguments):
    replica_id: str = Field(..., min_length=1)
    script: Optional[str] = None
    audio_url: Optional[str] = None
    video_name: Optional[str] = None
    background_url: Optional[str] = None
    background_source_url: Optional[str] = None
    callback_url: Optional[str] = None
    fast: Optional[bool] = None
    transparent_background: Optional[bool] = None
    watermark_image_url: Optional[str] = None
    properties: Optional[VideoProperties] = None

    @model_validator(mode="after")
    def check_script_or_audio(self) -> "GenerateVideoArguments":
        if self.script is None and self.audio_url is None:
            raise ValueError("either script or audio_url is required")
        return self


class VideoIdArguments(ToolArguments):
    video_id: str = Field(..., min_length=1)


class RenameVideoArguments(VideoIdArguments):
    video_name: str


# Conversations

class CreateConversationArguments(ToolArguments):
    replica_id: Optional[str] = None
    persona_id: Optional[str] = None
    conversation_name: Optional[str] = None
    callback_url: Optional[str] = None
    conversational_context: Optional[str] = None
    custom_greeting: Optional[str] = None
    enable_recording: Optional[bool] = None


class ConversationIdArguments(ToolArguments):
    conversation_id: str = Field(..., min_length=1)


# Personas

class PersonaLayers(ToolArguments):
    stt: Optional[Dict[str, Any]] = None
    llm: Optional[Dict[str, Any]] = None
    tts: Optional[Dict[str, Any]] = None
    perception: Optional[Dict[str, Any]] = None


class CreatePersonaArguments(ToolArguments):
    persona_name: Optional[str] = None
    replica_id: Optional[str] = None
    context: Optional[str] = None
    system_prompt: Optional[str] = None
    layers: Optional[PersonaLayers] = None


class PersonaIdArguments(ToolArguments):
    persona_id: str = Field(..., min_length=1)


class PatchOperation(ToolArguments):
    """One RFC 6902 operation"""
    op: PatchOp
    path: str
    value: Any = None
    from_: Optional[str] = Field(None, alias="from")


class PatchPersonaArguments(PersonaIdArguments):
    patch: List[PatchOperation]


# Lipsync

class CreateLipsyncArguments(ToolArguments):
    video_url: str
    audio_url: str
    callback_url: Optional[str] = None


class LipsyncIdArguments(ToolArguments):
    lipsync_id: str = Field(..., min_length=1)


# Speech

class GenerateSpeechArguments(ToolArguments):
    replica_id: str = Field(..., min_length=1)
    script: str
    speech_name: Optional[str] = None
    callback_url: Optional[str] = None


class SpeechIdArguments(ToolArguments):
    speech_id: str = Field(..., min_length=1)


class RenameSpeechArguments(SpeechIdArguments):
    speech_name: str


ARGUMENT_MODELS: Dict[str, Type[ToolArguments]] = {
    "create_replica": CreateReplicaArguments,
    "get_replica": GetReplicaArguments,
    "list_replicas": EmptyArguments,
    "delete_replica": ReplicaIdArguments,
    "rename_replica": RenameReplicaArguments,
    "generate_video": GenerateVideoArguments,
    "get_video": VideoIdArguments,
    "list_videos": EmptyArguments,
    "delete_video": VideoIdArguments,
    "rename_video": RenameVideoArguments,
    "create_conversation": CreateConversationArguments,
    "get_conversation": ConversationIdArguments,
    "list_conversations": EmptyArguments,
    "end_conversation": ConversationIdArguments,
    "delete_conversation": ConversationIdArguments,
    "create_persona": CreatePersonaArguments,
    "get_persona": PersonaIdArguments,
    "list_personas": EmptyArguments,
    "patch_persona": PatchPersonaArguments,
    "delete_persona": PersonaIdArguments,
    "create_lipsync": CreateLipsyncArguments,
    "get_lipsync": LipsyncIdArguments,
    "list_lipsyncs": EmptyArguments,
    "delete_lipsync": LipsyncIdArguments,
    "generate_speech": GenerateSpeechArguments,
    "get_speech": SpeechIdArguments,
    "list_speeches": EmptyArguments,
    "delete_speech": SpeechIdArguments,
    "rename_speech": RenameSpeechArguments,
}
