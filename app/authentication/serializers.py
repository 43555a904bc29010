"""
Serializers for authentication endpoints.
"""

from rest_framework_simplejwt.serializers import TokenObtainPairSerializer


class RoleTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Token pair serializer that embeds the user's role in the token claims.

    The role claim is informational for clients; authorization always reads
    the role from the database user resolved by the token.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        token["email"] = user.email
        return token
