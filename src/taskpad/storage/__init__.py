"""Key-value storage backends for the task slot."""
