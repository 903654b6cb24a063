"""
Image generation.

doc: https://platform.openai.com/docs/api-reference/images/create
"""

from typing import List, Optional
from .json_dataclass import *
from .errors import Error, InvalidInput

@json_dataclass(omit_none=True)
class ImagesGenerationsV1Input:
	prompt: Optional[str] = None
	n: Optional[int] = None
	size: Optional[str] = None
	'''"256x256", "512x512" or "1024x1024"'''
	response_format: Optional[str] = None
	'''"url" or "b64_json"'''
	user: Optional[str] = None

	def validate(self) -> None:
		if not self.prompt:
			raise InvalidInput("no prompt")

@json_dataclass(omit_none=True)
class ImagesGenerationsV1Data:
	url: Optional[str] = None
	b64_json: Optional[str] = None

@json_dataclass(omit_none=True)
class ImagesGenerationsV1Output:
	created: Optional[int] = None
	data: Optional[List[ImagesGenerationsV1Data]] = None
	error: Optional[Error] = None

	def urls(self) -> List[str]:
		return [image.url for image in self.data or [] if image.url]
