from schemas import ActionResult, FavoriteMenuItem, MenuItem
from usecases.base import BaseUsecase, run_action


class MenuUsecase(BaseUsecase):
    def get_menu_items(self) -> ActionResult[list[MenuItem]]:
        """Get the full menu.

        Returns:
            The menu items.

        """
        return run_action(
            request=lambda: self._client.get("/api/menu"), schema=list[MenuItem]
        )

    def get_menu_item(self, item_id: int) -> ActionResult[MenuItem]:
        """Get a single menu item.

        Args:
            item_id: The menu item id.

        Returns:
            The menu item.

        """
        return run_action(
            request=lambda: self._client.get(f"/api/menu/{item_id}"), schema=MenuItem
        )

    def get_favorite_items(self) -> ActionResult[list[FavoriteMenuItem]]:
        """Get the items shown in the favorites carousel."""
        return run_action(
            request=lambda: self._client.get("/api/menu/favorites"),
            schema=list[FavoriteMenuItem],
        )
