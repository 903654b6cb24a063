from typing import Any, Optional, TYPE_CHECKING
import os

if TYPE_CHECKING:
	from .ChatCompletions import ChatCompletionsV1Output, ChatCompletionsV1OutputChoiceMessage

def get_msg(output :'ChatCompletionsV1Output') -> Optional['ChatCompletionsV1OutputChoiceMessage']:
	'''
	Safely get the message of output.choices[0]
	'''
	if not output.choices:
		return None
	return output.choices[0].message

def get_msg_content(output :'ChatCompletionsV1Output') -> Optional[str]:
	'''
	Safely get the content of output.choices[0].message
	'''
	msg = get_msg(output)
	if msg is None:
		return None
	return msg.content

def get_finish_reason(output :'ChatCompletionsV1Output') -> Optional[str]:
	'''
	Safely get output.choices[0].finish_reason
	'''
	if not output.choices:
		return None
	return output.choices[0].finish_reason

def form_value(value:Any) -> str:
	'''Renders a value the way it is written into a multipart form field.'''
	if isinstance(value, bool):
		return str(value).lower()
	return str(value)

def file_name(file:Any) -> str:
	'''Base name of an open file, or "file" if it has none.'''
	name = getattr(file, 'name', None)
	if not isinstance(name, str) or not name:
		return "file"
	return os.path.basename(name)
