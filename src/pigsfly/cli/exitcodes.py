"""Process exit codes for the pigsfly CLI."""

EXIT_SUCCESS = 0
EXIT_ERROR = 1

# Used by ``solve --quiet``, where the exit status is the only output.
EXIT_ALL = EXIT_SUCCESS
EXIT_SOME = 2
EXIT_NONE = 3
