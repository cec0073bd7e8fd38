"""アプリケーション設定."""
