"""Scan client - 업로드/분류/진행도 갱신 흐름."""
