"""
Model listing.

doc: https://platform.openai.com/docs/api-reference/models
"""

from typing import List, Any, Optional
from .json_dataclass import *
from .errors import Error

@json_dataclass(omit_none=True)
class ListModelsV1Input:
	pass

@json_dataclass(omit_none=True)
class ListModelsV1Permission:
	id: Optional[str] = None
	object: Optional[str] = None
	created: Optional[int] = None
	allow_create_engine: Optional[bool] = None
	allow_sampling: Optional[bool] = None
	allow_logprobs: Optional[bool] = None
	allow_search_indices: Optional[bool] = None
	allow_view: Optional[bool] = None
	allow_fine_tuning: Optional[bool] = None
	organization: Optional[str] = None
	group: Optional[Any] = None
	is_blocking: Optional[bool] = None

@json_dataclass(omit_none=True)
class ListModelsV1Data:
	id: Optional[str] = None
	object: Optional[str] = None
	created: Optional[int] = None
	owned_by: Optional[str] = None
	permission: Optional[List[ListModelsV1Permission]] = None
	root: Optional[str] = None
	parent: Optional[Any] = None

@json_dataclass(omit_none=True)
class ListModelsV1Output:
	error: Optional[Error] = None
	object: Optional[str] = None
	data: Optional[List[ListModelsV1Data]] = None

	def ids(self) -> List[str]:
		'''Ids of all listed models, in the order the api returned them.'''
		return [model.id for model in self.data or [] if model.id]
