"""Tool catalogue exposed by the Tavus MCP server.

The list is built once at import time and returned as-is for every
``list_tools`` request, so the order below is the order clients see.
"""

from typing import List

from mcp.types import Tool


def _id_schema(field: str, resource: str) -> dict:
    """Input schema for tools that take a single resource identifier"""
    return {
        "type": "object",
        "properties": {
            field: {
                "type": "string",
                "description": f"Unique identifier for the {resource}"
            }
        },
        "required": [field]
    }


def _no_args_schema() -> dict:
    return {
        "type": "object",
        "properties": {}
    }


TOOLS: List[Tool] = [
    # Phoenix Replicas
    Tool(
        name="create_replica",
        description="Create a new AI replica from a training video",
        inputSchema={
            "type": "object",
            "properties": {
                "train_video_url": {
                    "type": "string",
                    "description": "Direct link to training video (S3, etc.)"
                },
                "replica_name": {
                    "type": "string",
                    "description": "Name for the replica"
                },
                "consent_video_url": {
                    "type": "string",
                    "description": "Optional separate consent video URL"
                },
                "callback_url": {
                    "type": "string",
                    "description": "URL to receive training completion callback"
                },
                "model_name": {
                    "type": "string",
                    "description": "Phoenix model version (phoenix-3 default)",
                    "enum": ["phoenix-2", "phoenix-3"]
                },
                "properties": {
                    "type": "object",
                    "description": "Additional replica properties",
                    "properties": {
                        "gaze_correction": {"type": "boolean"},
                        "background_green_screen": {"type": "boolean"}
                    }
                }
            },
            "required": ["train_video_url"]
        }
    ),
    Tool(
        name="get_replica",
        description="Get details of a specific replica",
        inputSchema={
            "type": "object",
            "properties": {
                "replica_id": {
                    "type": "string",
                    "description": "Unique identifier for the replica"
                },
                "verbose": {
                    "type": "boolean",
                    "description": "Include additional replica data"
                }
            },
            "required": ["replica_id"]
        }
    ),
    Tool(
        name="list_replicas",
        description="List all replicas in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="delete_replica",
        description="Delete a replica permanently",
        inputSchema=_id_schema("replica_id", "replica")
    ),
    Tool(
        name="rename_replica",
        description="Rename an existing replica",
        inputSchema={
            "type": "object",
            "properties": {
                "replica_id": {
                    "type": "string",
                    "description": "Unique identifier for the replica"
                },
                "replica_name": {
                    "type": "string",
                    "description": "New name for the replica"
                }
            },
            "required": ["replica_id", "replica_name"]
        }
    ),

    # Video Generation
    Tool(
        name="generate_video",
        description="Generate a video using a replica and script or audio",
        inputSchema={
            "type": "object",
            "properties": {
                "replica_id": {
                    "type": "string",
                    "description": "Unique identifier for the replica"
                },
                "script": {
                    "type": "string",
                    "description": "Text script for the video (alternative to audio_url)"
                },
                "audio_url": {
                    "type": "string",
                    "description": "URL to audio file (.wav/.mp3) (alternative to script)"
                },
                "video_name": {
                    "type": "string",
                    "description": "Name for the generated video"
                },
                "background_url": {
                    "type": "string",
                    "description": "Website URL to use as background"
                },
                "background_source_url": {
                    "type": "string",
                    "description": "Direct video URL to use as background"
                },
                "callback_url": {
                    "type": "string",
                    "description": "URL to receive completion callback"
                },
                "fast": {
                    "type": "boolean",
                    "description": "Use fast rendering (limited features)"
                },
                "transparent_background": {
                    "type": "boolean",
                    "description": "Generate with transparent background (.webm)"
                },
                "watermark_image_url": {
                    "type": "string",
                    "description": "URL to watermark image (png/jpeg)"
                },
                "properties": {
                    "type": "object",
                    "description": "Additional video properties",
                    "properties": {
                        "background_scroll": {"type": "boolean"},
                        "background_scroll_type": {"type": "string", "enum": ["human", "smooth"]},
                        "background_scroll_depth": {"type": "string", "enum": ["middle", "bottom"]},
                        "background_scroll_return": {"type": "string", "enum": ["return", "halt"]},
                        "start_with_wave": {"type": "boolean"}
                    }
                }
            },
            "required": ["replica_id"],
            "anyOf": [
                {"required": ["script"]},
                {"required": ["audio_url"]}
            ]
        }
    ),
    Tool(
        name="get_video",
        description="Get details of a specific video",
        inputSchema=_id_schema("video_id", "video")
    ),
    Tool(
        name="list_videos",
        description="List all videos in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="delete_video",
        description="Delete a video permanently",
        inputSchema=_id_schema("video_id", "video")
    ),
    Tool(
        name="rename_video",
        description="Rename an existing video",
        inputSchema={
            "type": "object",
            "properties": {
                "video_id": {
                    "type": "string",
                    "description": "Unique identifier for the video"
                },
                "video_name": {
                    "type": "string",
                    "description": "New name for the video"
                }
            },
            "required": ["video_id", "video_name"]
        }
    ),

    # Conversational Video Interface
    Tool(
        name="create_conversation",
        description="Create a new conversational video interface",
        inputSchema={
            "type": "object",
            "properties": {
                "replica_id": {
                    "type": "string",
                    "description": "Replica to use for the conversation"
                },
                "persona_id": {
                    "type": "string",
                    "description": "Persona to use for the conversation"
                },
                "conversation_name": {
                    "type": "string",
                    "description": "Name for the conversation"
                },
                "callback_url": {
                    "type": "string",
                    "description": "URL to receive conversation events"
                },
                "conversational_context": {
                    "type": "string",
                    "description": "Context for the conversation"
                },
                "custom_greeting": {
                    "type": "string",
                    "description": "Custom greeting message"
                },
                "enable_recording": {
                    "type": "boolean",
                    "description": "Enable conversation recording"
                }
            }
        }
    ),
    Tool(
        name="get_conversation",
        description="Get details of a specific conversation",
        inputSchema=_id_schema("conversation_id", "conversation")
    ),
    Tool(
        name="list_conversations",
        description="List all conversations in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="end_conversation",
        description="End an active conversation",
        inputSchema=_id_schema("conversation_id", "conversation")
    ),
    Tool(
        name="delete_conversation",
        description="Delete a conversation permanently",
        inputSchema=_id_schema("conversation_id", "conversation")
    ),

    # Replica Personas
    Tool(
        name="create_persona",
        description="Create a new persona for conversational AI",
        inputSchema={
            "type": "object",
            "properties": {
                "persona_name": {
                    "type": "string",
                    "description": "Name for the persona"
                },
                "replica_id": {
                    "type": "string",
                    "description": "Replica to use for this persona"
                },
                "context": {
                    "type": "string",
                    "description": "Contextual information for the LLM"
                },
                "system_prompt": {
                    "type": "string",
                    "description": "System prompt for the LLM"
                },
                "layers": {
                    "type": "object",
                    "description": "Configuration layers for the persona",
                    "properties": {
                        "stt": {"type": "object", "description": "Speech-to-text settings"},
                        "llm": {"type": "object", "description": "Language model settings"},
                        "tts": {"type": "object", "description": "Text-to-speech settings"},
                        "perception": {"type": "object", "description": "Perception settings (Raven-0)"}
                    }
                }
            }
        }
    ),
    Tool(
        name="get_persona",
        description="Get details of a specific persona",
        inputSchema=_id_schema("persona_id", "persona")
    ),
    Tool(
        name="list_personas",
        description="List all personas in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="patch_persona",
        description="Update a persona using JSON patch format",
        inputSchema={
            "type": "object",
            "properties": {
                "persona_id": {
                    "type": "string",
                    "description": "Unique identifier for the persona"
                },
                "patch": {
                    "type": "array",
                    "description": "JSON patch operations (RFC 6902)",
                    "items": {
                        "type": "object",
                        "properties": {
                            "op": {
                                "type": "string",
                                "enum": ["add", "remove", "replace", "copy", "move", "test"]
                            },
                            "path": {"type": "string"},
                            "value": {}
                        },
                        "required": ["op", "path"]
                    }
                }
            },
            "required": ["persona_id", "patch"]
        }
    ),
    Tool(
        name="delete_persona",
        description="Delete a persona permanently",
        inputSchema=_id_schema("persona_id", "persona")
    ),

    # Lipsync
    Tool(
        name="create_lipsync",
        description="Create a lipsync video by synchronizing audio with video",
        inputSchema={
            "type": "object",
            "properties": {
                "video_url": {
                    "type": "string",
                    "description": "URL to the source video"
                },
                "audio_url": {
                    "type": "string",
                    "description": "URL to the audio file to sync"
                },
                "callback_url": {
                    "type": "string",
                    "description": "URL to receive completion callback"
                }
            },
            "required": ["video_url", "audio_url"]
        }
    ),
    Tool(
        name="get_lipsync",
        description="Get details of a specific lipsync",
        inputSchema=_id_schema("lipsync_id", "lipsync")
    ),
    Tool(
        name="list_lipsyncs",
        description="List all lipsyncs in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="delete_lipsync",
        description="Delete a lipsync permanently",
        inputSchema=_id_schema("lipsync_id", "lipsync")
    ),

    # Speech
    Tool(
        name="generate_speech",
        description="Generate speech audio from text using a replica",
        inputSchema={
            "type": "object",
            "properties": {
                "replica_id": {
                    "type": "string",
                    "description": "Replica to use for speech generation"
                },
                "script": {
                    "type": "string",
                    "description": "Text script to convert to speech"
                },
                "speech_name": {
                    "type": "string",
                    "description": "Name for the generated speech"
                },
                "callback_url": {
                    "type": "string",
                    "description": "URL to receive completion callback"
                }
            },
            "required": ["replica_id", "script"]
        }
    ),
    Tool(
        name="get_speech",
        description="Get details of a specific speech",
        inputSchema=_id_schema("speech_id", "speech")
    ),
    Tool(
        name="list_speeches",
        description="List all speeches in your account",
        inputSchema=_no_args_schema()
    ),
    Tool(
        name="delete_speech",
        description="Delete a speech permanently",
        inputSchema=_id_schema("speech_id", "speech")
    ),
    Tool(
        name="rename_speech",
        description="Rename an existing speech",
        inputSchema={
            "type": "object",
            "properties": {
                "speech_id": {
                    "type": "string",
                    "description": "Unique identifier for the speech"
                },
                "speech_name": {
                    "type": "string",
                    "description": "New name for the speech"
                }
            },
            "required": ["speech_id", "speech_name"]
        }
    ),
]

TOOL_NAMES = [tool.name for tool in TOOLS]
