from contextlib import contextmanager

from sqlalchemy.orm import Session

from dsmovie.repositories.interface.transaction_manager import TransactionManager


class SQLAlchemyTransactionManager(TransactionManager):
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def atomic(self):
        try:
            yield
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
