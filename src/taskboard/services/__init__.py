"""
Service layer.

- user_service: user CRUD and the delete guard
- task_service: task CRUD and filtered listing
- dashboard_service: dashboard buckets over joined tasks
- task_categorizer: pure bucketing of tasks against a reference instant
"""
