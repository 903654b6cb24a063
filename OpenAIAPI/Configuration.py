from typing import Optional
from .json_dataclass import *
import os

DEFAULT_ENDPOINT = "https://api.openai.com"

@json_dataclass(omit_none=True, frozen=True)
class Configuration:
	'''
	Where and as whom OpenAIAPI talks to the api.

	Nothing here is required up front. A missing api key or organization
	only becomes an error once an authenticated call is made.
	'''

	endpoint: Optional[str] = None
	'''Base url of the api. If not set, the public endpoint (DEFAULT_ENDPOINT) is used.'''

	api_key: Optional[str] = None
	'''Sent as a bearer token on every request.'''

	organization: Optional[str] = None
	'''Sent as the OpenAI-Organization header on every request.'''

	timeout: Optional[float] = None
	'''Seconds to wait on each outbound request. None waits indefinitely.'''

	def __repr__(self) -> str:
		key = None if self.api_key is None else '***'
		return f"Configuration(endpoint={self.endpoint!r}, api_key={key!r}, organization={self.organization!r}, timeout={self.timeout!r})"

	__str__ = __repr__

	@staticmethod
	def from_env(
			endpoint_env:str="OPENAI_API_ENDPOINT",
			api_key_env:str="OPENAI_API_KEY",
			organization_env:str="OPENAI_ORGANIZATION",
			timeout_env:str="OPENAI_API_TIMEOUT"
			) -> 'Configuration':
		'''
		Build a configuration from environment variables.
		Unset (or empty) variables are left as None.
		'''
		timeout = os.environ.get(timeout_env) or None
		return Configuration(
			endpoint=os.environ.get(endpoint_env) or None,
			api_key=os.environ.get(api_key_env) or None,
			organization=os.environ.get(organization_env) or None,
			timeout=float(timeout) if timeout is not None else None
		)
