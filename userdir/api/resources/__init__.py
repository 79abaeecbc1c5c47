"""RestX Resource 基础设施."""
