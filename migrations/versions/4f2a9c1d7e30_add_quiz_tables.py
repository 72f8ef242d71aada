"""Add quiz, question and option tables

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19 10:12:03.418227

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = '4f2a9c1d7e30'
down_revision = None
branch_labels = None
depends_on = None

question_type = sa.Enum('BOOLEAN', 'INPUT', 'CHECKBOX', name='question_type')


def upgrade():
    inspector = inspect(op.get_bind())
    tables = inspector.get_table_names()

    # Create quizzes table
    if 'quizzes' not in tables:
        op.create_table('quizzes',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_quizzes_created_at', 'quizzes', ['created_at'], unique=False)

    # Create questions table
    if 'questions' not in tables:
        op.create_table('questions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('quiz_id', sa.Integer(), nullable=False),
            sa.Column('question_type', question_type, nullable=False),
            sa.Column('question_text', sa.Text(), nullable=False),
            sa.Column('correct_answer', sa.Boolean(), nullable=True),
            sa.Column('correct_text', sa.Text(), nullable=True),
            sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['quiz_id'], ['quizzes.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_questions_quiz_id', 'questions', ['quiz_id'], unique=False)
        op.create_index('ix_questions_quiz_order', 'questions', ['quiz_id', 'order_index'], unique=False)

    # Create options table
    if 'options' not in tables:
        op.create_table('options',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('question_id', sa.Integer(), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('is_correct', sa.Boolean(), nullable=False, server_default='0'),
            sa.Column('order_index', sa.Integer(), nullable=False, server_default='0'),
            sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_options_question_id', 'options', ['question_id'], unique=False)
        op.create_index('ix_options_question_order', 'options', ['question_id', 'order_index'], unique=False)


def downgrade():
    op.drop_index('ix_options_question_order', table_name='options')
    op.drop_index('ix_options_question_id', table_name='options')
    op.drop_table('options')

    op.drop_index('ix_questions_quiz_order', table_name='questions')
    op.drop_index('ix_questions_quiz_id', table_name='questions')
    op.drop_table('questions')
    question_type.drop(op.get_bind(), checkfirst=True)

    op.drop_index('ix_quizzes_created_at', table_name='quizzes')
    op.drop_table('quizzes')
