"""
Client for the OpenAI REST api.
"""

from typing import Dict, Any, Optional, Type, TypeVar
from urllib.parse import urlsplit, urlunsplit
import logging
import json
import requests

from .Configuration import Configuration, DEFAULT_ENDPOINT
from .errors import Error, InvalidInput, MissingCredential, DecodeFailure, Unauthorized, BadGateway, UnknownStatus
from .iface import OpenAIAPIIface
from .Models import ListModelsV1Input, ListModelsV1Output
from .ChatCompletions import ChatCompletionsV1Input, ChatCompletionsV1Output
from .AudioTranscriptions import AudioTranscriptionsV1Input, AudioTranscriptionsV1Output
from .Files import ListFileV1Input, ListFileV1Output
from .ImagesGenerations import ImagesGenerationsV1Input, ImagesGenerationsV1Output

logger = logging.getLogger(__name__)

O = TypeVar('O')

class OpenAIAPI(OpenAIAPIIface):
	"""Client for making requests to the OpenAI api."""

	def __init__(self, configuration:Configuration, session:Optional[requests.Session]=None):
		"""
		Initialize the client.

		Args:
			configuration: Endpoint and credentials to use
			session: Transport to send requests with. A new
				requests.Session is created if not given.
		"""
		self.configuration = configuration
		self.session = session if session is not None else requests.Session()

	def endpoint(self, path:str) -> str:
		'''
		Full url for an api path, on the configured endpoint
		(or DEFAULT_ENDPOINT if none is configured).
		'''
		base = self.configuration.endpoint or DEFAULT_ENDPOINT
		parts = urlsplit(base)
		if not parts.scheme or not parts.netloc:
			raise InvalidInput(f"invalid endpoint '{base}'")
		return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ''))

	def auth_headers(self) -> Dict[str, str]:
		'''
		Authentication headers for every request.

		Raises:
			MissingCredential: if the api key or organization is not configured
		'''
		if self.configuration.api_key is None:
			raise MissingCredential("api_key")
		if self.configuration.organization is None:
			raise MissingCredential("organization")
		return {
			"Authorization": f"Bearer {self.configuration.api_key}",
			"OpenAI-Organization": self.configuration.organization
		}

	def list_models_v1(self, input:Optional[ListModelsV1Input]=None) -> ListModelsV1Output:
		headers = self.auth_headers()
		return self._do("GET", "/v1/models", ListModelsV1Output, headers)

	def chat_completions_v1(self, input:ChatCompletionsV1Input) -> ChatCompletionsV1Output:
		input.validate()
		headers = self.auth_headers()
		headers["Content-Type"] = "application/json"
		return self._do("POST", "/v1/chat/completions", ChatCompletionsV1Output, headers, json=input.to_dict(encode_json=True))

	def list_file_v1(self, input:Optional[ListFileV1Input]=None) -> ListFileV1Output:
		headers = self.auth_headers()
		return self._do("GET", "/v1/files", ListFileV1Output, headers)

	def images_generations_v1(self, input:ImagesGenerationsV1Input) -> ImagesGenerationsV1Output:
		input.validate()
		headers = self.auth_headers()
		headers["Content-Type"] = "application/json"
		return self._do("POST", "/v1/images/generations", ImagesGenerationsV1Output, headers, json=input.to_dict(encode_json=True))

	def audio_transcriptions_v1(self, input:AudioTranscriptionsV1Input) -> AudioTranscriptionsV1Output:
		input.validate()
		# Content-Type (with its boundary) is set by requests for multipart bodies
		headers = self.auth_headers()
		files, data = input.multipart()
		return self._do("POST", "/v1/audio/transcriptions", AudioTranscriptionsV1Output, headers, files=files, data=data)

	def _do(self, method:str, path:str, output_type:Type[O], headers:Dict[str, str], **body:Any) -> O:
		'''
		Send one request and turn the response into output_type,
		or raise the error kind its status code maps to.
		'''
		url = self.endpoint(path)
		logger.debug("%s %s", method, url)
		response = self.session.request(method, url, headers=headers, timeout=self.configuration.timeout, **body)
		try:
			status_code = response.status_code
			text = response.text
		finally:
			response.close()
		logger.debug("%s %s -> %s", method, url, status_code)

		if status_code == 200:
			output = self._decode(output_type, status_code, text)
			if output.error is not None:
				logger.warning("%s %s returned an error body: %s", method, url, output.error.message)
			return output
		if status_code == 401:
			output = self._decode(output_type, status_code, text)
			logger.warning("%s %s unauthorized", method, url)
			raise Unauthorized(status_code, text, output)

		output = output_type(error=Error(message=text))
		logger.warning("%s %s failed with status %s", method, url, status_code)
		if status_code == 502:
			raise BadGateway(status_code, text, output)
		raise UnknownStatus(status_code, text, output)

	@staticmethod
	def _decode(output_type:Type[O], status_code:int, text:str) -> O:
		try:
			value = json.loads(text)
		except json.JSONDecodeError as e:
			raise DecodeFailure(f"response is not valid json: {e}", status_code, text) from e
		if not isinstance(value, dict):
			raise DecodeFailure("response is not a json object", status_code, text)
		try:
			return output_type.from_dict(value)
		except (TypeError, KeyError, ValueError, AttributeError) as e:
			raise DecodeFailure(f"response does not fit {output_type.__name__}: {e}", status_code, text) from e
