"""
OpenAIAPI - A typed client for the OpenAI REST api.
"""

import logging

__version__ = "0.1.0"

from .Configuration import Configuration, DEFAULT_ENDPOINT
from .errors import (
	Error,
	OpenAIAPIError,
	MissingCredential,
	InvalidInput,
	UnsupportedFormat,
	DecodeFailure,
	APIStatusError,
	Unauthorized,
	BadGateway,
	UnknownStatus,
	ArgumentResolutionError,
	NoChoices,
	FunctionNotFound
)
from .Function import SchemaBuilder, Function, Tool, new_function
from .Models import ListModelsV1Input, ListModelsV1Output, ListModelsV1Data, ListModelsV1Permission
from .ChatCompletions import (
	Message,
	FunctionCall,
	ToolCall,
	ChoiceKind,
	ChatCompletionsV1Input,
	ChatCompletionsV1Output,
	ChatCompletionsV1OutputChoice,
	ChatCompletionsV1OutputUsage
)
from .Files import ListFileV1Input, ListFileV1Output, ListFileV1Data
from .ImagesGenerations import ImagesGenerationsV1Input, ImagesGenerationsV1Output, ImagesGenerationsV1Data
from .AudioTranscriptions import AudioTranscriptionsV1Input, AudioTranscriptionsV1Output, AudioTranscriptionsV1Segment
from .iface import OpenAIAPIIface
from .api import OpenAIAPI

logging.getLogger(__name__).addHandler(logging.NullHandler())
