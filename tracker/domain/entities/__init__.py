from tracker.domain.entities.log_entry import LogEntry

__all__ = ["LogEntry"]
