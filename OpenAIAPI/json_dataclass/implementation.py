from dataclasses import dataclass, Field, field, fields, is_dataclass
from dataclasses_json import dataclass_json, config
from typing import List, Dict, Any, Type, TypeVar, Generic, Callable, Optional, overload
from typing import get_origin
import collections.abc

T = TypeVar('T')

MISSING = object()

def _is_none(value:Any) -> bool:
	return value is None

class _JSON_DataclassMixin(Generic[T]):
	'''
	Used to type hint dataclass_json methods.

	This is not used at runtime, and you will never get an actual instance of this.
	'''
	def to_dict(self, encode_json:bool=False) -> Dict[str, Any]:
		pass
	def to_json(self, indent:Optional[int]=None) -> str:
		pass
	@staticmethod
	def from_dict(dict:Dict[str,Any]) -> T:
		pass
	@staticmethod
	def from_json(j:str) -> T:
		pass

@overload
def json_dataclass(omit_none:bool=False, frozen:bool=False, exclude:List[str|Type]=[collections.abc.Callable]) -> Callable[[Type[T]], Type[T] | Type[_JSON_DataclassMixin[T]]]:
	pass

@overload
def json_dataclass(_cls: Type[T]) -> Type[T] | Type[_JSON_DataclassMixin[T]]:
	pass
def json_dataclass(*args, **kwargs) -> Callable[[Type[T]], Type[T] | Type[_JSON_DataclassMixin[T]]] | Type[T] | Type[_JSON_DataclassMixin[T]]:
	'''
	Turns cls into a dataclass that can be written to and read from json.

	omit_none: Fields holding None are left out of to_dict / to_json, the
		way the api expects optional request parameters to be absent.
	frozen: Instances are immutable once constructed.
	exclude: Field names or types that are never serialized.
	'''
	def wrap(cls:Type[T]) -> Type[T]:
		return _process_class(cls, *args, **kwargs)

	if len(args)==1 and len(kwargs)==0 and isinstance(args[0], type):
		#if the only argument we have is a type, it's the thing we're decorating:
		return _process_class(args[0])
	# if not, we'll assume _cls is an arg and return a decorator that will treat it like one:
	return wrap

def _process_class(cls: Type[T], omit_none:bool=False, frozen:bool=False, exclude:List[str|Type]=[collections.abc.Callable]) -> Type[T] | Type[_JSON_DataclassMixin[T]]:
	# Organize what things we're to exclude:
	field_exclusion = set()
	type_exclusion = set()
	for item in exclude:
		if isinstance(item, str):
			field_exclusion.add(item)
		else:
			type_exclusion.add(item)

	def set_field_config(field_name:str, **overrides):
		'''
		Merge dataclasses_json overrides into the field's metadata,
		keeping its default and any metadata already on it.
		'''
		default = cls.__dict__.get(field_name, MISSING)
		if isinstance(default, Field):
			default.metadata = config(metadata=dict(default.metadata), **overrides)
		elif default is MISSING:
			setattr(cls, field_name, field(metadata=config(**overrides)))
		else:
			setattr(cls, field_name, field(default=default, metadata=config(**overrides)))

	for field_name, field_type in list(cls.__dict__.get('__annotations__', {}).items()):
		if field_name in field_exclusion:
			set_field_config(field_name, exclude=lambda _:True)
			continue

		type_origin = get_origin(field_type)
		if type_origin in type_exclusion or field_type in type_exclusion:
			set_field_config(field_name, exclude=lambda _:True)
			continue

		if omit_none:
			set_field_config(field_name, exclude=_is_none)

	if omit_none and '__str__' not in cls.__dict__:
		def __str__(self) -> str:
			return self.to_json()
		cls.__str__ = __str__

	cls = dataclass(cls, frozen=frozen)
	cls = dataclass_json(cls)

	return cls

def decode_into(value:Any, into:Optional[Type[T]]) -> T | Any:
	'''
	Builds an instance of 'into' from a decoded json value.

	json_dataclass types are built with from_dict, other classes
	with keyword arguments, and None returns value unchanged.
	'''
	if into is None:
		return value
	if hasattr(into, 'from_dict') and isinstance(value, dict):
		return into.from_dict(value)
	if isinstance(value, dict) and (is_dataclass(into) or isinstance(into, type)):
		if is_dataclass(into):
			names = {f.name for f in fields(into)}
			value = {k:v for k,v in value.items() if k in names}
		return into(**value)
	return into(value)
