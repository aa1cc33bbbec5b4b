"""IZLY test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The `izly` command line driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; substitute the secret gate and the
  random source with autospecced mocks or scripted fakes.
- Property-based tests (Hypothesis) live with the layer they exercise.
- End-to-end tests assert user-observable output and exit codes, not internals.
"""
