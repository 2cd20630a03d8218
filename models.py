from extensions import db, login_manager
from datetime import datetime
from flask_login import UserMixin
import uuid

# Recognized project categories, in display order
PROJECT_CATEGORIES = ('web', 'mobile', 'design')


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(500), nullable=False)
    demo_url = db.Column(db.String(500))
    repo_url = db.Column(db.String(500))
    category = db.Column(db.String(50), nullable=False)
    tags = db.Column(db.Text, nullable=False, default='')  # comma-separated, split on read
    featured = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_projects_created_at', 'created_at'),
    )

    @property
    def tag_list(self):
        return [tag.strip() for tag in (self.tags or '').split(',') if tag.strip()]

    def to_dict(self):
        """Public JSON representation, keyed the way the front-end reads it"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'imageUrl': self.image_url,
            'demoUrl': self.demo_url,
            'repoUrl': self.repo_url,
            'category': self.category,
            'tags': self.tags,
            'featured': bool(self.featured),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<Project {self.id} {self.title!r}>'


class AdminUser(UserMixin, db.Model):
    __tablename__ = 'admin_users'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False, default='Admin')
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'email': self.email}


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(AdminUser, user_id)
