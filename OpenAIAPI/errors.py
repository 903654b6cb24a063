"""
Error payloads and exception kinds for OpenAIAPI.
"""

from typing import Any, Optional
from .json_dataclass import *

@json_dataclass(omit_none=True)
class Error:
	'''
	Error body as reported by the api, either embedded in a response
	envelope or wrapped around a raw response body.
	'''
	message: Optional[str] = None
	type: Optional[str] = None
	param: Optional[Any] = None
	code: Optional[Any] = None

class OpenAIAPIError(Exception):
	"""Base class for every error raised by OpenAIAPI."""

class MissingCredential(OpenAIAPIError):
	"""A credential needed to authenticate the request is not configured."""
	def __init__(self, credential:str):
		self.credential = credential
		super().__init__(f"no {credential} configured")

class InvalidInput(OpenAIAPIError, ValueError):
	"""Operation input failed local validation. Raised before any network call."""

class UnsupportedFormat(InvalidInput):
	"""Requested response format is not one this client can decode."""
	def __init__(self, response_format:str, supported:tuple):
		self.response_format = response_format
		self.supported = supported
		super().__init__(f"response_format '{response_format}' is not supported, expected one of: {', '.join(supported)}")

class DecodeFailure(OpenAIAPIError):
	"""A body or argument string that should be json could not be decoded."""
	def __init__(self, message:str, status_code:Optional[int]=None, body:Optional[str]=None):
		self.status_code = status_code
		self.body = body
		if body is not None:
			message = f"{message} (status_code: {status_code}, body: {body[:200]})"
		super().__init__(message)

class APIStatusError(OpenAIAPIError):
	'''
	The api answered with a status other than 200.

	output is always populated with whatever the api sent back, so
	callers can inspect the error body without re-issuing the call.
	'''
	def __init__(self, status_code:int, body:str, output:Any):
		self.status_code = status_code
		self.body = body
		self.output = output
		super().__init__(self._describe())

	def _describe(self) -> str:
		return f"status_code: {self.status_code}, msg: {self.body}"

class Unauthorized(APIStatusError):
	"""401 from the api."""
	def _describe(self) -> str:
		error = getattr(self.output, 'error', None)
		if error is not None and error.message:
			return f"Unauthorized: {error.message}"
		return "Unauthorized"

class BadGateway(APIStatusError):
	"""502 from the api."""
	def _describe(self) -> str:
		return f"Bad Gateway, msg: {self.body}"

class UnknownStatus(APIStatusError):
	"""Any other non-200 status from the api."""

class ArgumentResolutionError(OpenAIAPIError):
	"""Function calling arguments could not be located in a chat completion."""

class NoChoices(ArgumentResolutionError):
	def __init__(self):
		super().__init__("choices is empty")

class FunctionNotFound(ArgumentResolutionError):
	def __init__(self, function_name:str):
		self.function_name = function_name
		super().__init__(f"function name: {function_name} is not found")
