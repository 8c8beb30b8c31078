from fastapi import Depends

from folio.repos.content_repo import FileContentStore
from folio.services.pages_service import PagesService
from folio.services.posts_service import PostsService
from folio.settings import Settings, get_settings


def get_content_store(current_settings: Settings = Depends(get_settings)):
    return FileContentStore(
        content_root=current_settings.content_root,
        posts_dir=current_settings.posts_dir,
        extension=current_settings.CONTENT_EXTENSION,
        index_name=current_settings.PAGE_INDEX_NAME,
    )


def get_posts_service(store=Depends(get_content_store)):
    return PostsService(store)


def get_pages_service(store=Depends(get_content_store)):
    # new instance per request: page memoization is request-scoped
    return PagesService(store)
