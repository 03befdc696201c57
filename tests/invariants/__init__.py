"""
Structural invariants of List1

Property tests that drive List1 through arbitrary operation sequences and
check that the content never becomes empty and that refused operations
leave it untouched.
"""
