"""Framework-free view-models for the RemoteTasks demo apps."""
