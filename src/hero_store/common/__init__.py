"""共通ユーティリティ."""
