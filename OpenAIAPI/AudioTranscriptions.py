"""
Audio transcription.

doc: https://platform.openai.com/docs/api-reference/audio/createTranscription
"""

from typing import List, Dict, Any, Optional, BinaryIO, Tuple
from .json_dataclass import *
from .errors import Error, InvalidInput, UnsupportedFormat
from .helpers import form_value, file_name

SUPPORTED_RESPONSE_FORMATS = ("json", "verbose_json")
'''Formats that come back as json. text, srt and vtt are plain text and not decoded by this client.'''

FORM_FIELDS = ("model", "language", "temperature", "response_format", "prompt")

@dataclass
class AudioTranscriptionsV1Input:
	file: Optional[BinaryIO] = None
	'''Audio file opened in binary mode. It is read in full but left open.'''
	model: Optional[str] = None
	language: Optional[str] = None
	temperature: Optional[float] = None
	response_format: Optional[str] = None
	prompt: Optional[str] = None

	def validate(self) -> None:
		if self.file is None:
			raise InvalidInput("no file")
		if not self.model:
			raise InvalidInput("no models")
		if self.response_format is not None and self.response_format not in SUPPORTED_RESPONSE_FORMATS:
			raise UnsupportedFormat(self.response_format, SUPPORTED_RESPONSE_FORMATS)

	def multipart(self) -> Tuple[Dict[str, Tuple[str, bytes]], Dict[str, str]]:
		'''
		Split this input into the file part and the plain form fields of
		a multipart body. Unset optional fields are not written.
		'''
		files = {"file": (file_name(self.file), self.file.read())}
		data = {}
		for name in FORM_FIELDS:
			value = getattr(self, name)
			if value is not None:
				data[name] = form_value(value)
		return files, data

@json_dataclass(omit_none=True)
class AudioTranscriptionsV1Segment:
	id: Optional[int] = None
	seek: Optional[int] = None
	start: Optional[float] = None
	end: Optional[float] = None
	text: Optional[str] = None
	tokens: Optional[List[int]] = None
	temperature: Optional[float] = None
	avg_logprob: Optional[float] = None
	compression_ratio: Optional[float] = None
	no_speech_prob: Optional[float] = None
	transient: Optional[bool] = None

@json_dataclass(omit_none=True)
class AudioTranscriptionsV1Output:
	text: Optional[str] = None
	task: Optional[str] = None
	language: Optional[str] = None
	duration: Optional[float] = None
	segments: Optional[List[AudioTranscriptionsV1Segment]] = None
	'''Only present for response_format "verbose_json".'''

	error: Optional[Error] = None
