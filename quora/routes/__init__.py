# Routes package init
"""
Quora Backend — API Routes Package
====================================

Route Inventory:
    - users.py:     POST /user/signup, /user/signin, /user/signout
                    GET  /userprofile/{userId}
    - admin.py:     DELETE /admin/user/{userId}
    - questions.py: /question/create, /question/all, /question/all/{userId},
                    /question/edit/{questionId}, /question/delete/{questionId}
    - answers.py:   /question/{questionId}/answer/create, /answer/edit/{answerId},
                    /answer/delete/{answerId}, /answer/all/{questionId}
    - health.py:    GET /health

Routes stay thin: read the request, call one service operation, shape the
response. Authorization and ownership live in the services.
"""
