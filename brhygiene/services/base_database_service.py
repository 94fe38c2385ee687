from typing import Any, Dict, List, Optional, Type


class BaseDatabaseService:
    """
    Base class for database service implementations.

    This class defines the interface for the database operations the website
    needs: inserting records and selecting them back. Concrete database
    service implementations should inherit from this class, set
    `backend_name`, and override the stub methods.

    The class also maintains a registry of its subclasses so the backend can
    be chosen by name from configuration.
    """

    backend_name: Optional[str] = None

    # class-level list of all concrete subclasses
    subclasses: List[Type["BaseDatabaseService"]] = []

    def __init_subclass__(cls, **kwargs):
        """
        Hook that registers concrete subclasses of BaseDatabaseService.

        This ensures that all specific database service implementations are
        tracked in the `subclasses` list.
        """
        super().__init_subclass__(**kwargs)
        # skip the base class itself
        if cls is not BaseDatabaseService:
            BaseDatabaseService.subclasses.append(cls)

    @classmethod
    def registry(cls) -> Dict[str, Type["BaseDatabaseService"]]:
        """Map of backend name to implementation for every named subclass."""
        return {
            subclass.backend_name: subclass
            for subclass in cls.subclasses
            if subclass.backend_name
        }

    def insert_data(self, table_name: str, data: Any, **kwargs) -> Any:
        """
        Inserts a new record into the specified table.

        This is a default stub method that must be overridden by concrete
        subclasses to provide the actual database insertion logic.

        Args:
            table_name (str): The name of the table to insert into.
            data (Any): The data for the new record.
            **kwargs: Additional keyword arguments that might be specific
                      to the underlying database implementation.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.insert_data not implemented")

    def select_data(self, table_name: str, **kwargs) -> Any:
        """
        Selects records from the specified table based on provided criteria.

        This is a default stub method that must be overridden by concrete
        subclasses to provide the actual database selection logic.

        Args:
            table_name (str): The name of the table to select from.
            **kwargs: Keyword arguments specifying the selection criteria,
                      specific to the underlying database implementation.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.select_data not implemented")


def get_database_service(settings) -> BaseDatabaseService:
    """Instantiate the backend named by `settings.DATABASE_BACKEND`."""
    # importing the implementations registers them
    from brhygiene.services import memory_database_service, supabase_service  # noqa: F401

    backends = BaseDatabaseService.registry()
    try:
        backend_cls = backends[settings.DATABASE_BACKEND]
    except KeyError:
        raise ValueError(
            f"Unknown DATABASE_BACKEND {settings.DATABASE_BACKEND!r}, "
            f"expected one of {sorted(backends)}"
        )
    return backend_cls(settings)
