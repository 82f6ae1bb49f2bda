"""HTML controllers.

- index: recipe overview
- recipes: show / create / update / delete a recipe
- ingredients: ingredient lines of a recipe
"""
