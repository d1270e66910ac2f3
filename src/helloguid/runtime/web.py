from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse

FORM_PACKAGE = "helloguid._frontend"
FORM_FILE = "index.html"


def _mount_form(app: FastAPI, *, form_path: Path) -> None:
    if not form_path.is_file():
        raise FileNotFoundError(str(form_path))

    @app.get("/", include_in_schema=False)
    @app.get("/{path:path}", include_in_schema=False)
    def _greeting_form(path: str = ""):
        # Unknown API routes stay JSON 404s instead of falling back to the form.
        if path == "api" or path.startswith("api/"):
            raise HTTPException(status_code=404, detail=f"Unknown API route: /{path}")
        return FileResponse(str(form_path), media_type="text/html")


def mount_frontend(app: FastAPI) -> None:
    """Serve the greeting web form packaged under `helloguid/_frontend/dist/`.

    Must be called after the API routes are mounted, since the catch-all route
    would otherwise shadow them.
    """

    from importlib import resources as importlib_resources

    dist_root = importlib_resources.files(FORM_PACKAGE).joinpath("dist")
    with importlib_resources.as_file(dist_root) as dist_root_path:
        form_path = Path(dist_root_path) / FORM_FILE
        if form_path.is_file():
            _mount_form(app, form_path=form_path)
            return

    raise FileNotFoundError(
        f"helloguid web form is missing. Expected {FORM_PACKAGE.replace('.', '/')}/dist/{FORM_FILE} "
        "inside the installed package."
    )
