"""
Initial schema: users, user_auth, questions and answers.

Child rows cascade on delete of their user or question.
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'initial_20241001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('first_name', sa.String(length=30), nullable=False),
        sa.Column('last_name', sa.String(length=30), nullable=False),
        sa.Column('user_name', sa.String(length=30), nullable=False),
        sa.Column('email', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('country', sa.String(length=30), nullable=True),
        sa.Column('about_me', sa.String(length=50), nullable=True),
        sa.Column('dob', sa.String(length=30), nullable=True),
        sa.Column('contact_number', sa.String(length=30), nullable=True),
        sa.Column('role', sa.String(length=30), nullable=False, server_default='nonadmin'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('user_name', name='uq_users_user_name'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    op.create_table(
        'user_auth',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('user_id', sa.UUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('token_id', sa.String(length=64), nullable=False),
        sa.Column('token_hash', sa.Text(), nullable=False),
        sa.Column('login_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('logout_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_user_auth_token_id', 'user_auth', ['token_id'], unique=True)
    op.create_index('idx_user_auth_user_login', 'user_auth', ['user_id', 'login_at'])

    op.create_table(
        'questions',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('content', sa.String(length=500), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('user_id', sa.UUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_questions_user_created', 'questions', ['user_id', 'created_at'])

    op.create_table(
        'answers',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('content', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('user_id', sa.UUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('question_id', sa.UUID(), sa.ForeignKey('questions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_answers_question_created', 'answers', ['question_id', 'created_at'])


def downgrade() -> None:
    op.drop_index('idx_answers_question_created', table_name='answers')
    op.drop_table('answers')
    op.drop_index('idx_questions_user_created', table_name='questions')
    op.drop_table('questions')
    op.drop_index('idx_user_auth_user_login', table_name='user_auth')
    op.drop_index('ix_user_auth_token_id', table_name='user_auth')
    op.drop_table('user_auth')
    op.drop_table('users')
