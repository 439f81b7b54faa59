# -*- coding: utf-8 -*-
"""FastAPI dependencies.

Authentication happens upstream; the identity gateway forwards the verified user id in
the ``X-User-Id`` header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
