from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lang_portal.repositories import (
    GroupRepository,
    StudyActivityRepository,
    StudySessionRepository,
    WordRepository,
)
from lang_portal.services import (
    DashboardService,
    GroupService,
    StudyActivityService,
    StudySessionService,
    WordService,
)
from lang_portal.unit_of_work import SqlAlchemyUnitOfWork


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    uow = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Repositories
    word_repository = providers.Factory(WordRepository, db=db)
    group_repository = providers.Factory(GroupRepository, db=db)
    study_activity_repository = providers.Factory(StudyActivityRepository, db=db)
    study_session_repository = providers.Factory(StudySessionRepository, db=db)

    # Services
    word_service = providers.Factory(
        WordService,
        word_repository=word_repository,
        uow=uow,
    )
    group_service = providers.Factory(
        GroupService,
        group_repository=group_repository,
        study_session_repository=study_session_repository,
        uow=uow,
    )
    study_activity_service = providers.Factory(
        StudyActivityService,
        study_activity_repository=study_activity_repository,
        study_session_repository=study_session_repository,
        uow=uow,
    )
    study_session_service = providers.Factory(
        StudySessionService,
        study_session_repository=study_session_repository,
        word_repository=word_repository,
        uow=uow,
    )
    dashboard_service = providers.Factory(
        DashboardService,
        study_session_repository=study_session_repository,
        word_repository=word_repository,
    )


# Initialize container
container = Container()
