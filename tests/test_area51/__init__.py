"""
Area 51 elevator tests

Covers:
- Floor access rules
- Elevator call/move/door protocol and retry to Ground
- Mutual exclusion of concurrent call sequences
- Configuration loading and the simulation harness
"""
