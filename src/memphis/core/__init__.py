"""構図生成のコア（描画バックエンド非依存）。"""
