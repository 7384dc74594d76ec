"""mlscaffold - ML project scaffolding generator"""
