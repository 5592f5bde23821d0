"""Email SQLAlchemy model."""
import enum
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer

from mailstore.database import Base


class EmailState(str, enum.Enum):
    """Lifecycle states of an email."""
    DRAFT = "DRAFT"      # created but not sent yet
    SENT = "SENT"        # sent or received
    DELETED = "DELETED"  # moved to trash, record kept
    SPAM = "SPAM"        # classified as spam


class StoredEmail(Base):
    """Email database model."""
    
    __tablename__ = "emails"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    state = Column(String(20), nullable=False, index=True)
    from_address = Column(String(255), nullable=False, index=True)
    from_display_name = Column(String(255), nullable=True)
    recipients = Column(Text, nullable=False, default="[]")  # JSON array of addresses
    cc = Column(Text, nullable=False, default="[]")  # JSON array of addresses
    subject = Column(Text, nullable=False, default="")
    body = Column(Text, nullable=False, default="")
    modified_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    def __repr__(self):
        return f"<StoredEmail(id={self.id}, state={self.state}, subject='{self.subject[:50] if self.subject else 'N/A'}')>"
