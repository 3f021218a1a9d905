from whitelist_admin.models.whitelist import WhitelistEntry

__all__ = [
    "WhitelistEntry",
]
