"""CPS evaluation engine: evaluator, application, special forms and trampoline."""
