"""
Chat completions: request, response and function calling argument parsing.

doc: https://platform.openai.com/docs/api-reference/chat
"""

from typing import List, Dict, Any, Optional, Type, TypeVar
from enum import Enum
import json
from .json_dataclass import *
from .errors import Error, InvalidInput, DecodeFailure, NoChoices, FunctionNotFound
from .Function import Function, Tool

T = TypeVar('T')

@json_dataclass(omit_none=True)
class FunctionCall:
	'''A call the model asks the caller to make. arguments is a json string.'''
	name: Optional[str] = None
	arguments: Optional[str] = None

	def decode(self, into:Optional[Type[T]]=None) -> T | Any:
		'''
		Decode arguments into 'into' (or plain json values if into is None).
		'''
		try:
			value = json.loads(self.arguments or "")
		except json.JSONDecodeError as e:
			raise DecodeFailure(f"arguments of function '{self.name}' are not valid json: {e}") from e
		try:
			return decode_into(value, into)
		except (TypeError, KeyError, ValueError) as e:
			raise DecodeFailure(f"arguments of function '{self.name}' do not fit {getattr(into, '__name__', into)}: {e}") from e

@json_dataclass(omit_none=True)
class ToolCall:
	id: Optional[str] = None
	type: Optional[str] = None
	function: Optional[FunctionCall] = None

@json_dataclass(omit_none=True)
class Message:
	role: Optional[str] = None
	content: Optional[str] = None
	name: Optional[str] = None
	function_call: Optional[FunctionCall] = None
	tool_calls: Optional[List[ToolCall]] = None
	tool_call_id: Optional[str] = None
	'''Set on "tool" role messages carrying the result of a tool call back to the model.'''

@json_dataclass(omit_none=True)
class ChatCompletionsV1Input:
	model: Optional[str] = None
	messages: Optional[List[Message]] = None
	functions: Optional[List[Function]] = None
	function_call: Optional[Any] = None
	'''"none", "auto" or {"name": <function name>}'''
	tools: Optional[List[Tool]] = None
	tool_choice: Optional[Any] = None
	'''"none", "auto" or {"type": "function", "function": {"name": <function name>}}'''
	temperature: Optional[float] = None
	top_p: Optional[float] = None
	n: Optional[int] = None
	stop: Optional[List[str]] = None
	max_tokens: Optional[int] = None
	presence_penalty: Optional[float] = None
	frequency_penalty: Optional[float] = None
	logit_bias: Optional[Dict[str, Any]] = None
	user: Optional[str] = None

	def validate(self) -> None:
		if not self.model:
			raise InvalidInput("model is empty")
		if not self.messages:
			raise InvalidInput("messages is empty")

@json_dataclass(omit_none=True)
class ChatCompletionsV1OutputUsage:
	prompt_tokens: Optional[int] = None
	completion_tokens: Optional[int] = None
	total_tokens: Optional[int] = None

ChatCompletionsV1OutputChoiceFunctionCall = FunctionCall
ChatCompletionsV1OutputChoiceMessage = Message

class ChoiceKind(Enum):
	MESSAGE=0
	FUNCTION_CALL=1
	TOOL_CALLS=2

@json_dataclass(omit_none=True)
class ChatCompletionsV1OutputChoice:
	message: Optional[Message] = None
	finish_reason: Optional[str] = None
	index: Optional[int] = None

	@property
	def kind(self) -> ChoiceKind:
		'''
		Which shape of answer this choice holds. A legacy function call
		wins over tool calls if a message somehow carries both.
		'''
		if self.message is not None:
			if self.message.function_call is not None:
				return ChoiceKind.FUNCTION_CALL
			if self.message.tool_calls:
				return ChoiceKind.TOOL_CALLS
		return ChoiceKind.MESSAGE

	@property
	def function_call(self) -> Optional[FunctionCall]:
		if self.kind is ChoiceKind.FUNCTION_CALL:
			return self.message.function_call
		return None

	@property
	def tool_calls(self) -> List[ToolCall]:
		if self.kind is ChoiceKind.TOOL_CALLS:
			return self.message.tool_calls
		return []

@json_dataclass(omit_none=True)
class ChatCompletionsV1Output:
	id: Optional[str] = None
	object: Optional[str] = None
	created: Optional[int] = None
	model: Optional[str] = None
	usage: Optional[ChatCompletionsV1OutputUsage] = None
	choices: Optional[List[ChatCompletionsV1OutputChoice]] = None

	error: Optional[Error] = None

	def parse_arguments(self, func_name:str, into:Optional[Type[T]]=None) -> T | Any:
		'''
		Find the call to func_name among all choices and decode its arguments.

		Legacy function calls are searched first. If the response holds any
		legacy function call at all, tool calls are not searched, even when
		none of the legacy calls is named func_name.

		Args:
			func_name: Name of the declared function
			into: Type to decode the arguments into. None returns the
				decoded json as is.

		Returns:
			The decoded arguments

		Raises:
			NoChoices: The response has no choices
			FunctionNotFound: No call to func_name was found
			DecodeFailure: A matching call's arguments could not be decoded
		'''
		if not self.choices:
			raise NoChoices()

		function_calls = [c.function_call for c in self.choices if c.kind is ChoiceKind.FUNCTION_CALL]
		if function_calls:
			for fc in function_calls:
				if fc.name != func_name:
					continue
				return fc.decode(into)
			raise FunctionNotFound(func_name)

		tool_call_lists = [c.tool_calls for c in self.choices if c.kind is ChoiceKind.TOOL_CALLS]
		decode_failure = None
		for tool_calls in tool_call_lists:
			for tc in tool_calls:
				if tc.function is None or tc.function.name != func_name:
					continue
				try:
					return tc.function.decode(into)
				except DecodeFailure as e:
					decode_failure = e
				break
		if decode_failure is not None:
			raise decode_failure
		raise FunctionNotFound(func_name)
