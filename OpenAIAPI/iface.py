"""
Interface implemented by OpenAIAPI, and by anything standing in for it.
"""

from typing import Optional
from .Models import ListModelsV1Input, ListModelsV1Output
from .ChatCompletions import ChatCompletionsV1Input, ChatCompletionsV1Output
from .AudioTranscriptions import AudioTranscriptionsV1Input, AudioTranscriptionsV1Output
from .Files import ListFileV1Input, ListFileV1Output
from .ImagesGenerations import ImagesGenerationsV1Input, ImagesGenerationsV1Output

class OpenAIAPIIface:
	"""Base class for api clients."""

	def list_models_v1(self, input:Optional[ListModelsV1Input]=None) -> ListModelsV1Output:
		raise NotImplementedError("Subclasses must implement this method")

	def chat_completions_v1(self, input:ChatCompletionsV1Input) -> ChatCompletionsV1Output:
		raise NotImplementedError("Subclasses must implement this method")

	def audio_transcriptions_v1(self, input:AudioTranscriptionsV1Input) -> AudioTranscriptionsV1Output:
		raise NotImplementedError("Subclasses must implement this method")

	def list_file_v1(self, input:Optional[ListFileV1Input]=None) -> ListFileV1Output:
		raise NotImplementedError("Subclasses must implement this method")

	def images_generations_v1(self, input:ImagesGenerationsV1Input) -> ImagesGenerationsV1Output:
		raise NotImplementedError("Subclasses must implement this method")
