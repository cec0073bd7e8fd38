"""ヒーロー関連のモジュール."""
