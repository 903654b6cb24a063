"""
File listing.

doc: https://platform.openai.com/docs/api-reference/files/list
"""

from typing import List, Any, Optional
from .json_dataclass import *
from .errors import Error

@json_dataclass(omit_none=True)
class ListFileV1Input:
	pass

@json_dataclass(omit_none=True)
class ListFileV1Data:
	id: Optional[str] = None
	object: Optional[str] = None
	bytes: Optional[int] = None
	created_at: Optional[int] = None
	filename: Optional[str] = None
	purpose: Optional[str] = None
	status: Optional[str] = None
	status_details: Optional[Any] = None

@json_dataclass(omit_none=True)
class ListFileV1Output:
	data: Optional[List[ListFileV1Data]] = None
	object: Optional[str] = None
	error: Optional[Error] = None
