import uuid
import base58
from django.db import models
from django.conf import settings


class Base58UUIDv5Field(models.CharField):
    """
    Primary-key field holding a Base58 encoded UUIDv5.

    The UUIDv5 is derived from the platform namespace (``settings.PLATFORM_NAMESPACE``)
    and a fresh UUIDv4 per record, so ids are short, URL safe and unique.
    """
    description = "A Base58 encoded UUIDv5 derived from the platform namespace."

    def __init__(self, *args, **kwargs):
        # A 16 byte UUID is at most 22 Base58 characters
        kwargs['max_length'] = 22
        kwargs['unique'] = True
        kwargs['editable'] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def get_namespace() -> uuid.UUID:
        namespace = settings.PLATFORM_NAMESPACE
        if isinstance(namespace, uuid.UUID):
            return namespace
        return uuid.UUID(str(namespace))

    def generate_id(self) -> str:
        uuid_obj = uuid.uuid5(self.get_namespace(), str(uuid.uuid4()))
        return base58.b58encode(uuid_obj.bytes).decode('ascii')

    def pre_save(self, model_instance, add):
        if add and not getattr(model_instance, self.attname):
            setattr(model_instance, self.attname, self.generate_id())
        return super().pre_save(model_instance, add)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs.pop('max_length', None)
        kwargs.pop('unique', None)
        kwargs.pop('editable', None)
        return name, path, args, kwargs
