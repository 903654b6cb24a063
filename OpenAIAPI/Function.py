"""
Function and tool declarations sent with a chat completion.
"""

from typing import Any, Dict, Optional, Protocol, Type, Union, runtime_checkable
from .json_dataclass import *
from .errors import InvalidInput

@runtime_checkable
class SchemaBuilder(Protocol):
	'''
	Implemented by argument types that can describe themselves as a json schema.

	example:

		@json_dataclass
		class FuncResult:
			foo: str
			bar: int

			@classmethod
			def json_schema(cls) -> Dict[str, Any]:
				return {
					"type": "object",
					"properties": {
						"foo": {"type": "string"},
						"bar": {"type": "integer"}
					},
					"required": ["foo", "bar"]
				}
	'''
	@classmethod
	def json_schema(cls) -> Dict[str, Any]:
		...

@json_dataclass(omit_none=True)
class Function:
	name: str
	description: Optional[str] = None
	parameters: Optional[Dict[str, Any]] = None
	'''Json schema of the arguments the model should call this function with.'''

@json_dataclass(omit_none=True)
class Tool:
	function: Function
	type: str = "function"

	@staticmethod
	def of(function:Function) -> 'Tool':
		return Tool(function=function)

def new_function(name:str, description:str, schema:Union[Type[SchemaBuilder], SchemaBuilder, Dict[str, Any]]) -> Function:
	'''
	Declare a function for function calling.

	Args:
		name: Name the model will call the function by
		description: What the function does, shown to the model
		schema: A type implementing SchemaBuilder (or an instance of one),
			or an already built json schema dict

	Returns:
		The Function, ready to pass as functions=[...] or tools=[Tool.of(...)]
	'''
	if not name:
		raise InvalidInput("function name is empty")
	if isinstance(schema, dict):
		parameters = schema
	elif callable(getattr(schema, 'json_schema', None)):
		parameters = schema.json_schema()
	else:
		raise InvalidInput(f"failed to generate schema: {schema!r} does not implement json_schema()")
	return Function(
		name=name,
		description=description,
		parameters=parameters
	)
