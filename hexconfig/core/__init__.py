"""Core config logic, logging and errors for hexconfig."""
