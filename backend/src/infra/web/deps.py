from typing import Optional

from fastapi import Header, HTTPException, status


def get_viewer_id(x_viewer_id: Optional[str] = Header(default=None)) -> Optional[str]:
    if x_viewer_id is None or not x_viewer_id.strip():
        return None

    return x_viewer_id.strip()


def require_viewer_id(x_viewer_id: Optional[str] = Header(default=None)) -> str:
    viewer_id = get_viewer_id(x_viewer_id)

    if viewer_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="X-Viewer-Id header is required")

    return viewer_id


def get_account_id(x_account_id: Optional[int] = Header(default=None)) -> Optional[int]:
    return x_account_id


def require_account_id(x_account_id: Optional[int] = Header(default=None)) -> int:
    if x_account_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-Account-Id header is required")

    return x_account_id
