from flask_cors import CORS
from flask_mail import Mail

cors = CORS()
mail = Mail()
