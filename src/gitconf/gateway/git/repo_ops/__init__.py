"""Repository and revision operations sub-gateway.

Import from submodules:
- abc: GitRepoOps
- real: RealGitRepoOps
"""
