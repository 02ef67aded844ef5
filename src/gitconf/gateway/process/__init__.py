"""Process invocation gateway.

This module provides the primitive every git gateway is built on.

Import from submodules:
- abc: ProcessRunner
- real: RealProcessRunner
- fake: FakeProcessRunner
- types: CommandResult, CommandError, InvocationError, flatten_args
"""
