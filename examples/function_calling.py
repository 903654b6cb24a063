"""
Example of function calling: declare a function, let the model call it,
then decode the arguments it was called with.
"""

from typing import Any, Dict
from OpenAIAPI import OpenAIAPI, Configuration, ChatCompletionsV1Input, Message, Tool, new_function, FunctionNotFound
from OpenAIAPI.json_dataclass import json_dataclass

@json_dataclass
class Weather:
	location: str
	unit: str = "celsius"

	@classmethod
	def json_schema(cls) -> Dict[str, Any]:
		return {
			"type": "object",
			"properties": {
				"location": {"type": "string", "description": "The city and state, e.g. San Francisco, CA"},
				"unit": {"type": "string", "enum": ["celsius", "fahrenheit"]}
			},
			"required": ["location"]
		}

def main():
	api = OpenAIAPI(Configuration.from_env())
	get_weather = new_function("get_current_weather", "Get the current weather in a given location", Weather)

	output = api.chat_completions_v1(ChatCompletionsV1Input(
		model="gpt-3.5-turbo",
		messages=[Message(role="user", content="What's the weather like in Boston?")],
		tools=[Tool.of(get_weather)],
		tool_choice="auto"
	))

	try:
		weather = output.parse_arguments(get_weather.name, Weather)
	except FunctionNotFound:
		print("The model answered without calling the function:")
		print(output)
		return
	print(f"The model asked for the weather in {weather.location} ({weather.unit})")

if __name__ == "__main__":
	main()
