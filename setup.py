from setuptools import setup, find_packages

setup(
	name="OpenAIAPI",
	version="0.1.0",
	description="A typed client for the OpenAI REST api.",
	long_description=open("README.md").read(),
	long_description_content_type="text/markdown",
	packages=find_packages(include=["OpenAIAPI", "OpenAIAPI.*"]),
	classifiers=[
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	],
	python_requires=">=3.10.12",
	install_requires=[
		"requests",
		"dataclasses-json",
	],
)
