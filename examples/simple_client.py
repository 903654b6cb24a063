"""
Simple example of using the OpenAIAPI client.

Reads OPENAI_API_KEY and OPENAI_ORGANIZATION from the environment.
"""

from OpenAIAPI import OpenAIAPI, Configuration, ChatCompletionsV1Input, Message, Unauthorized
from OpenAIAPI.helpers import get_msg_content, get_finish_reason
import logging

def main():
	logging.basicConfig(level=logging.DEBUG)

	# Create a client
	api = OpenAIAPI(Configuration.from_env())

	try:
		models = api.list_models_v1()
	except Unauthorized as e:
		print(f"Check your api key: {e.output.error.message}")
		return
	print("Models:")
	for model_id in models.ids():
		print(f"  {model_id}")

	# Create a completion
	output = api.chat_completions_v1(ChatCompletionsV1Input(
		model="gpt-3.5-turbo",
		messages=[
			Message(role="system", content="Only write 1 word answers"),
			Message(role="user", content="What is 2*2"),
		],
		max_tokens=16
	))
	if output.error is not None:
		print(f"The api reported an error: {output.error.message}")
		return

	print("Final Response:")
	print(get_msg_content(output))
	print(f"finish_reason: {get_finish_reason(output)}")
	print(f"\n\n{output}\n")

if __name__ == "__main__":
	main()
