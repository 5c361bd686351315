from delivery.output import deliver_run, deliver_show, deliver_token

__all__ = ["deliver_run", "deliver_show", "deliver_token"]
