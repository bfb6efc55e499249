"""Key/value storage backends and the task snapshot adapter."""
