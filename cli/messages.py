"""
User-facing console text.
"""

WELCOME = "Welcome to the Recipe Application!"
FAREWELL = "Thank you for using the Recipe Application!"

ENTER_RECIPE_NAME = "Enter the name of the recipe:"
ENTER_INGREDIENT_COUNT = "Enter the number of ingredients:"
ENTER_STEP_COUNT = "Enter the number of steps:"
INGREDIENT_HEADER = "Ingredient {number}:"
INGREDIENT_NAME = "Name:"
INGREDIENT_QUANTITY = "Quantity:"
INGREDIENT_UNIT = "Unit of measurement:"
INGREDIENT_CALORIES = "Calories:"
INGREDIENT_FOOD_GROUP = "Food Group:"
STEP_HEADER = "Step {number}:"
STEP_DESCRIPTION = "Description:"
RECIPE_ADDED = "Recipe added successfully!"
ADD_ANOTHER = "Do you want to add another recipe? (yes/no)"

INVALID_NUMBER = "Invalid input. Please enter a valid number."
INVALID_QUANTITY = "Invalid input. Please enter a valid quantity."
INVALID_CALORIES = "Invalid input. Please enter valid calories."

MENU_HEADER = "Select an option:"
MENU_LIST_ALL = "1. Display all recipes"
MENU_SHOW_ONE = "2. Display a specific recipe"
MENU_EXIT = "3. Exit"
RECIPES_HEADER = "Recipes:"
RECIPE_NOT_FOUND = "Recipe not found."
INVALID_OPTION = "Invalid option. Please try again."
