"""Branch operations sub-gateway.

Import from submodules:
- abc: GitBranchOps
- real: RealGitBranchOps
- types: RemoteBranch, parse_remote_branch
"""
