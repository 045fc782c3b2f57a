"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .items import TagItem
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase, TagWithCountItem
from .update_tag import UpdateTagRequest, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagItem",
    "TagWithCountItem",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
