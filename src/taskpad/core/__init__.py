"""
Command core.

Components:
- instructions.py: parsed command variants
- parser.py: command line -> Instruction
- executor.py: Instruction -> TaskList change + reply text
- ports.py / state.py: store protocol and session state
"""
