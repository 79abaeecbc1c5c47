"""用户相关服务."""

from userdir.services.users.user_detail_read_service import UserDetailReadService
from userdir.services.users.user_seed_service import UserSeedService
from userdir.services.users.user_write_service import UserWriteService
from userdir.services.users.users_list_service import UsersListService

__all__ = ["UserDetailReadService", "UserSeedService", "UserWriteService", "UsersListService"]
