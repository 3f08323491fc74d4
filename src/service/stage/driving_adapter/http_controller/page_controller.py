from fastapi import APIRouter
from fastapi.responses import FileResponse

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import NotFoundError


router = APIRouter()

PAGES = {
    '/': 'index.html',
    '/stage': 'index.html',
    '/passport': 'passport.html',
    '/admin': 'admin.html',
}


def _serve_page(file_name: str) -> FileResponse:
    page = settings.PUBLIC_DIR / file_name
    if not page.is_file():
        raise NotFoundError('Not found')
    return FileResponse(page, headers={'Cache-Control': 'no-cache'})


def _page_endpoint(file_name: str):
    async def serve() -> FileResponse:
        return _serve_page(file_name)

    return serve


for route_path, page_file in PAGES.items():
    router.add_api_route(
        route_path,
        _page_endpoint(page_file),
        methods=['GET'],
        include_in_schema=False,
        name=f'page:{page_file}:{route_path}',
    )
