import unittest
from unittest.mock import Mock
import io
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import requests
from OpenAIAPI import (
	OpenAIAPI,
	Configuration,
	AudioTranscriptionsV1Input,
	AudioTranscriptionsV1Output,
	InvalidInput,
	UnsupportedFormat,
	Unauthorized,
	BadGateway,
)

VERBOSE_BODY = json.dumps({
	"task": "transcribe",
	"language": "english",
	"duration": 8.47,
	"text": "The beach was a popular spot on a hot summer day.",
	"segments": [
		{
			"id": 0,
			"seek": 0,
			"start": 0.0,
			"end": 3.32,
			"text": " The beach was a popular spot on a hot summer day.",
			"tokens": [50364, 440, 7534, 390],
			"temperature": 0.0,
			"avg_logprob": -0.286,
			"compression_ratio": 1.2363636,
			"no_speech_prob": 0.00985,
			"transient": False
		}
	]
})

def audio_file(name:str="/tmp/recordings/speech.mp3") -> io.BytesIO:
	f = io.BytesIO(b"ID3fake-mp3-bytes")
	f.name = name
	return f

def api_answering(status_code:int, text:str):
	response = Mock()
	response.status_code = status_code
	response.text = text
	session = Mock(spec=requests.Session)
	session.request.return_value = response
	return OpenAIAPI(Configuration(api_key="sk-test", organization="org-test"), session), session


class TestAudioTranscriptionsInput(unittest.TestCase):
	"""Test validation and multipart encoding of transcription requests."""

	def test_missing_file(self):
		with self.assertRaises(InvalidInput):
			AudioTranscriptionsV1Input(model="whisper-1").validate()

	def test_missing_model(self):
		with self.assertRaises(InvalidInput):
			AudioTranscriptionsV1Input(file=audio_file()).validate()

	def test_supported_formats(self):
		for response_format in (None, "json", "verbose_json"):
			AudioTranscriptionsV1Input(file=audio_file(), model="whisper-1", response_format=response_format).validate()

	def test_unsupported_format_before_payload(self):
		f = Mock()
		input = AudioTranscriptionsV1Input(file=f, model="whisper-1", response_format="text")
		api, session = api_answering(200, '{"text": ""}')
		with self.assertRaises(UnsupportedFormat) as ctx:
			api.audio_transcriptions_v1(input)
		self.assertEqual(ctx.exception.response_format, "text")
		self.assertIsInstance(ctx.exception, InvalidInput)
		f.read.assert_not_called()
		session.request.assert_not_called()

	def test_multipart_fields(self):
		files, data = AudioTranscriptionsV1Input(
			file=audio_file(),
			model="whisper-1",
			temperature=0.2,
			response_format="verbose_json"
		).multipart()
		self.assertEqual(files, {"file": ("speech.mp3", b"ID3fake-mp3-bytes")})
		self.assertEqual(data, {"model": "whisper-1", "temperature": "0.2", "response_format": "verbose_json"})

	def test_file_without_name(self):
		files, data = AudioTranscriptionsV1Input(file=io.BytesIO(b"raw"), model="whisper-1").multipart()
		self.assertEqual(files["file"], ("file", b"raw"))
		self.assertEqual(data, {"model": "whisper-1"})


class TestAudioTranscriptions(unittest.TestCase):
	"""Test transcription round trips."""

	def test_json(self):
		api, session = api_answering(200, '{"text": "Hello world."}')
		output = api.audio_transcriptions_v1(AudioTranscriptionsV1Input(
			file=audio_file(),
			model="whisper-1",
			language="en",
			prompt="Greeting"
		))
		self.assertIsInstance(output, AudioTranscriptionsV1Output)
		self.assertEqual(output.text, "Hello world.")
		self.assertIsNone(output.segments)

		args, kwargs = session.request.call_args
		self.assertEqual(args, ("POST", "https://api.openai.com/v1/audio/transcriptions"))
		self.assertEqual(kwargs["data"], {"model": "whisper-1", "language": "en", "prompt": "Greeting"})
		self.assertEqual(kwargs["files"]["file"][0], "speech.mp3")
		self.assertNotIn("Content-Type", kwargs["headers"])
		self.assertEqual(kwargs["headers"]["Authorization"], "Bearer sk-test")

	def test_verbose_json(self):
		api, _ = api_answering(200, VERBOSE_BODY)
		output = api.audio_transcriptions_v1(AudioTranscriptionsV1Input(
			file=audio_file(),
			model="whisper-1",
			response_format="verbose_json"
		))
		self.assertEqual(output.language, "english")
		self.assertAlmostEqual(output.duration, 8.47)
		self.assertEqual(len(output.segments), 1)
		segment = output.segments[0]
		self.assertEqual(segment.tokens, [50364, 440, 7534, 390])
		self.assertAlmostEqual(segment.avg_logprob, -0.286)
		self.assertAlmostEqual(segment.no_speech_prob, 0.00985)
		self.assertAlmostEqual(segment.end, 3.32)

	def test_unauthorized(self):
		api, _ = api_answering(401, '{"error": {"message": "Invalid Authentication", "type": "invalid_request_error"}}')
		with self.assertRaises(Unauthorized) as ctx:
			api.audio_transcriptions_v1(AudioTranscriptionsV1Input(file=audio_file(), model="whisper-1"))
		self.assertEqual(ctx.exception.output.error.message, "Invalid Authentication")

	def test_bad_gateway(self):
		api, _ = api_answering(502, "bad gateway")
		with self.assertRaises(BadGateway) as ctx:
			api.audio_transcriptions_v1(AudioTranscriptionsV1Input(file=audio_file(), model="whisper-1"))
		self.assertIsInstance(ctx.exception.output, AudioTranscriptionsV1Output)
		self.assertEqual(ctx.exception.output.error.message, "bad gateway")

if __name__ == '__main__':
	unittest.main()
