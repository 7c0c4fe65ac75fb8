# Import the declarative base
from treasury.db.base import Base

# Import all models so they register themselves on Base.metadata
# (Alembic's env.py and the test fixtures rely on this).
from treasury.models.users import User
from treasury.models.transactions import Transaction
from treasury.models.prebendas import Prebenda
from treasury.models.registrations import Registration
from treasury.models.payments import Payment
from treasury.models.pastor_registrations import PastorRegistration
from treasury.models.obreiro_registrations import ObreiroRegistration
from treasury.models.document_ranges import DocumentRange
from treasury.models.document_numbers import DocumentNumberClaim
from treasury.models.financial_goals import FinancialGoal
